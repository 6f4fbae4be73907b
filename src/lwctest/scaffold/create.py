"""Generate a boilerplate Jest test file for a Lightning web component."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from lwctest.core.errors import (
    ComponentFileNotFoundError,
    InvalidModuleFileError,
    TestFileExistsError,
)
from lwctest.core.models import CreateResult

TEST_DIR_NAME = "__tests__"
MODULE_SUFFIX = ".js"

_UPPERCASE_PATTERN = re.compile(r"[A-Z]")

_TEST_SUITE_TEMPLATE = """\
import {{ createElement }} from 'lwc';
import {class_name} from 'c/{module_name}';

describe('{element_name}', () => {{
    afterEach(() => {{
        // The jsdom instance is shared across test cases in a single file so reset the DOM
        while (document.body.firstChild) {{
            document.body.removeChild(document.body.firstChild);
        }}
    }});

    it('TODO: test case generated by CLI command, please fill in test logic', () => {{
        const element = createElement('{element_name}', {{
            is: {class_name}
        }});
        document.body.appendChild(element);
        expect(1).toBe(2);
    }});
}});"""

logger = logging.getLogger(__name__)


def class_name_for(module_name: str) -> str:
    """Return the import binding used for *module_name* (``myButton`` -> ``MyButton``)."""
    return module_name[:1].upper() + module_name[1:]


def element_name_for(module_name: str) -> str:
    """Return the custom element tag for *module_name* (``myButton`` -> ``c-my-button``)."""
    return "c-" + _UPPERCASE_PATTERN.sub(lambda match: "-" + match.group(0), module_name).lower()


def render_test_suite(module_name: str) -> str:
    """Return the Jest test file contents for *module_name*."""
    return _TEST_SUITE_TEMPLATE.format(
        module_name=module_name,
        class_name=class_name_for(module_name),
        element_name=element_name_for(module_name),
    )


def create_test_file(filepath: str, *, cwd: Path | None = None) -> CreateResult:
    """Write ``__tests__/<module>.test.js`` next to the component module at *filepath*."""
    candidate = Path(filepath)
    module_path = candidate if candidate.is_absolute() else (cwd or Path.cwd()) / candidate

    if module_path.suffix != MODULE_SUFFIX:
        message = f"File must be a JavaScript module with a {MODULE_SUFFIX} extension: {filepath}"
        raise InvalidModuleFileError(message)
    if not module_path.exists():
        message = f"File not found: {filepath}"
        raise ComponentFileNotFoundError(message)

    module_name = module_path.stem
    test_dir = module_path.parent / TEST_DIR_NAME
    test_path = test_dir / f"{module_name}.test{MODULE_SUFFIX}"
    if test_path.exists():
        message = f"Test file already exists: {test_path}"
        raise TestFileExistsError(message)

    test_dir.mkdir(exist_ok=True)
    test_path.write_text(render_test_suite(module_name), encoding="utf-8")
    logger.info("Created test file", extra={"test_path": str(test_path)})

    return CreateResult(
        message=f"Test case successfully created: {test_path}",
        test_path=str(test_path),
        class_name=class_name_for(module_name),
        element_name=element_name_for(module_name),
    )


__all__ = [
    "TEST_DIR_NAME",
    "class_name_for",
    "create_test_file",
    "element_name_for",
    "render_test_suite",
]
