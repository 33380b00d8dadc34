from pathlib import Path

from arith.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_2_parentheses(capsys):
    main([str(EXAMPLES / 'program_2.arith')])
    out = capsys.readouterr().out.strip()
    # parentheses override precedence
    assert out == '20.0'
