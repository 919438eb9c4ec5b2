"""Tests that modules import cleanly in a fresh interpreter."""

import subprocess
import sys

import pytest


@pytest.mark.parametrize(
    "module",
    [
        "tallybook.cli.main",
        "tallybook.database",
        "tallybook.database.base",
        "tallybook.domain.entities",
        "tallybook.domain.transaction",
    ],
)
def test_module_imports_in_fresh_interpreter(module):
    result = subprocess.run(
        [sys.executable, "-c", f"import {module}"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr


def test_domain_package_exports_services_lazily():
    import tallybook.domain as domain
    from tallybook.domain.transaction import TransactionService

    assert domain.TransactionService is TransactionService
    with pytest.raises(AttributeError):
        domain.MissingService
