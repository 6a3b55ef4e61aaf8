"""Check that all code blocks in docstrings are properly closed."""

import ast
import re
from pathlib import Path
from typing import NamedTuple, TypeIs

import rich
import rich.table
import rich.text

import fpkit as fp
from fpkit import array as A
from fpkit import option as O

SRC_DIR = Path().joinpath("src", "fpkit")
CODE_BLOCK_PATTERN = re.compile(r"^```(\w*)", re.MULTILINE)
SKIP_DECORATORS = frozenset({"overload", "override", "deprecated", "wraps"})


class DocstringError(NamedTuple):
    """Error found in a docstring."""

    file_path: Path
    func_name: str
    line_no: int
    error_line_no: int
    errors: list[str]


class ErrorDetail(NamedTuple):
    """Detail of an error with its line number."""

    line_no: int
    message: str


class State(NamedTuple):
    """State during code block traversal."""

    errors: list[ErrorDetail]
    stack: list[tuple[int, str]]

    def to_blocks(self, start_line: int) -> list[ErrorDetail]:
        """Convert unclosed blocks in the stack to error details."""
        return A.concat(
            self.errors,
            [
                ErrorDetail(
                    line_no=start_line + idx - 1, message=f"Unclosed ```{lang} block"
                )
                for idx, lang in self.stack
            ],
        )


def _check_file(file_path: Path) -> list[DocstringError]:
    try:
        tree = ast.parse(file_path.read_text(encoding="utf-8"))
    except SyntaxError:
        return []

    protocol_methods = _get_protocol_methods(tree)

    return fp.pipe(
        list(ast.walk(tree)),
        A.filter(_is_documentable),
        A.reject(_has_skip_decorator),
        A.map(lambda node: _process_node(file_path, node, protocol_methods)),
        A.filter(O.is_some),
        A.map(O.unwrap()),
    )


def _get_protocol_methods(tree: ast.Module) -> set[int]:
    """Get line numbers of all methods inside Protocol classes."""

    def _is_class_def(node: ast.AST) -> TypeIs[ast.ClassDef]:
        return isinstance(node, ast.ClassDef)

    def _is_protocol(expr: ast.expr) -> TypeIs[ast.Name | ast.Attribute]:
        return (isinstance(expr, ast.Name) and expr.id == "Protocol") or (
            isinstance(expr, ast.Attribute) and expr.attr == "Protocol"
        )

    return {
        node.lineno
        for cls in A.filter(ast.walk(tree), _is_class_def)
        if A.any(cls.bases, _is_protocol)
        for node in A.filter(ast.walk(cls), _is_documentable)
    }


def _is_documentable(node: ast.AST) -> TypeIs[ast.FunctionDef | ast.AsyncFunctionDef]:
    return isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))


def _process_node(
    file_path: Path,
    node: ast.FunctionDef | ast.AsyncFunctionDef,
    protocol_methods: set[int],
) -> fp.Option[DocstringError]:
    def _is_public(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
        return not node.name.startswith("_") and not node.name.istitle()

    docstring = O.from_nullable(ast.get_docstring(node))
    if docstring.is_none():
        if _is_public(node) and node.lineno not in protocol_methods:
            return fp.Some(
                DocstringError(
                    file_path=file_path,
                    func_name=node.name,
                    line_no=node.lineno,
                    error_line_no=node.lineno,
                    errors=["Missing docstring"],
                )
            )
        return fp.NONE

    match _check_code_blocks(docstring.unwrap(), node.lineno, node.name):
        case fp.Err(errors):
            return fp.Some(
                DocstringError(
                    file_path=file_path,
                    func_name=node.name,
                    line_no=node.lineno,
                    error_line_no=errors[0].line_no,
                    errors=A.map(errors, lambda e: e.message),
                )
            )
        case _:
            return fp.NONE


def _has_skip_decorator(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    """Check if function has a decorator that should skip docstring check."""

    def _name(d: ast.expr) -> str:
        match d:
            case ast.Call(func=func):
                return _name(func)
            case ast.Name(id=name) | ast.Attribute(attr=name):
                return name
            case _:
                return ""

    return A.any(node.decorator_list, lambda d: _name(d) in SKIP_DECORATORS)


def _check_code_blocks(
    docstring: str, start_line: int, func_name: str
) -> fp.Result[None, list[ErrorDetail]]:
    """Check that all code blocks in docstring are properly closed and that at least one python block exists."""

    def _process_line(state: State, numbered: tuple[int, str]) -> State:
        """Process a single line and update state."""
        line_num, line = numbered
        marker = "```"
        match = CODE_BLOCK_PATTERN.search(line)
        if not (match and line.strip().startswith(marker)):
            return state
        language = match.group(1) or "plaintext"
        if line.strip() == marker:
            if state.stack:
                return State(errors=state.errors, stack=state.stack[:-1])
            return State(
                errors=A.append(
                    state.errors,
                    ErrorDetail(
                        line_no=start_line + line_num,
                        message="Closing block ``` without matching opening",
                    ),
                ),
                stack=state.stack,
            )
        return State(
            errors=state.errors, stack=A.append(state.stack, (line_num + 1, language))
        )

    lines = docstring.split("\n")
    block_errors = A.reduce(
        list(enumerate(lines)), _process_line, State(errors=[], stack=[])
    ).to_blocks(start_line)
    errors = A.concat(block_errors, _check_errs(lines, func_name, start_line))
    return fp.Err(errors) if errors else fp.Ok(None)


def _check_errs(lines: list[str], func_name: str, start_line: int) -> list[ErrorDetail]:
    should_skip = (
        func_name.startswith("_")
        or func_name.istitle()
        or A.any(
            lines,
            lambda line: bool(CODE_BLOCK_PATTERN.search(line) and "python" in line),
        )
    )
    if should_skip:
        return []
    return [
        ErrorDetail(
            line_no=start_line,
            message="Missing doctest: No ```python block found in docstring",
        )
    ]


def main() -> None:
    """Check all docstrings in the project."""
    rich.print(
        rich.text.Text(
            "Checking docstrings for properly closed code blocks...", style="cyan bold"
        )
    )

    files = sorted(SRC_DIR.rglob("*.py"))
    rich.print(f"Checking {len(files)} py files...")
    all_errors = [error for path in files for error in _check_file(path)]

    if not all_errors:
        rich.print(rich.text.Text("[OK] No issues found!", style="green"))
        return

    table = rich.table.Table(title="Issues Found", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Function", style="magenta")
    table.add_column("Error", style="red")
    for error in all_errors:
        table.add_row(
            f"{error.file_path.relative_to(Path())}:{error.error_line_no}",
            error.func_name,
            "\n".join(error.errors),
        )
    rich.print(table)
    rich.print(
        rich.text.Text(f"\n[FAILED] Found {len(all_errors)} issue(s)", style="red")
    )


if __name__ == "__main__":
    main()
