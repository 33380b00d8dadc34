from pathlib import Path

from arith.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_program_3_let_binding(capsys):
    main([str(EXAMPLES / 'program_3.arith')])
    out = capsys.readouterr().out.strip()
    # x stays visible to later statements
    assert out == '6.0'
