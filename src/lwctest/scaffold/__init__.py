"""Test file scaffolding for Lightning web components."""

from .create import TEST_DIR_NAME, class_name_for, create_test_file, element_name_for, render_test_suite

__all__ = [
    "TEST_DIR_NAME",
    "class_name_for",
    "create_test_file",
    "element_name_for",
    "render_test_suite",
]
