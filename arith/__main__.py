"""CLI entry point for the Arith interpreter.

Usage:
    python -m arith [-v|-vv|-vvv] [--frontend descent|lark] <program_file>
    python -m arith [-v...] --tokens <program_file>
    python -m arith [-v...] --emit-ast <program_file>
    python -m arith [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --frontend    Parser used to read the program (default: descent)
  --tokens      Print the tokens of the given .arith file and exit
  --emit-ast    Parse the given .arith file and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

The value of the program's last statement is printed to standard output.
Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path
from .interpreter import FRONTENDS, Interpreter
from .lexer import tokenize
from .ast_json import ast_to_obj, ast_from_obj
from .errors import ArithError
from .types import to_string


def read_source(path_arg: str) -> str:
    program_file = Path(path_arg)
    if not program_file.exists():
        print(f"Error: file {program_file} not found", file=sys.stderr)
        sys.exit(1)
    with open(program_file, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='arith', description="Arith expression language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--frontend', choices=sorted(FRONTENDS), default='descent', help='parser used to read the program')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--tokens', metavar='ARITH_FILE', help='print the tokens of the given .arith file')
    group.add_argument('--emit-ast', metavar='ARITH_FILE', help='emit AST JSON for the given .arith file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('program', nargs='?', help='Arith program file (.arith) to execute')
    args = parser.parse_args(argv)

    try:
        # Token dump mode
        if args.tokens:
            for index, token in enumerate(tokenize(read_source(args.tokens))):
                print(f"Token {index}: {token}")
            return

        # Emit AST mode
        if args.emit_ast:
            program_file = Path(args.emit_ast)
            ast_program = FRONTENDS[args.frontend](read_source(args.emit_ast))
            obj = ast_to_obj(ast_program)
            out_path = program_file.with_name(program_file.name + '.ast.json')
            with open(out_path, 'w', encoding='utf-8') as out:
                json.dump(obj, out, ensure_ascii=False, indent=2)
            print(str(out_path))
            return

        # Execute from AST JSON
        if args.ast:
            ast_path = Path(args.ast)
            if not ast_path.exists():
                print(f"Error: file {ast_path} not found", file=sys.stderr)
                sys.exit(1)
            try:
                with open(ast_path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                ast_program = ast_from_obj(data)
            except (ValueError, KeyError, TypeError) as e:
                print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
                sys.exit(1)
        else:
            # Default: execute source file
            if not args.program:
                parser.error('missing program file; or use --tokens/--emit-ast/--ast')
            ast_program = FRONTENDS[args.frontend](read_source(args.program))

        interpreter = Interpreter(debug_level=args.v)
        try:
            print(to_string(interpreter.run(ast_program)))
        finally:
            interpreter.close()
    except ArithError as e:
        print(f"{e.kind}: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
