import subprocess
import sys

import pytest


@pytest.mark.parametrize(
    "module",
    [
        "model_configuration.core.formulas",
        "model_configuration.core.entities",
        "model_configuration.validation.configuration_validator",
        "model_configuration.value_origin",
    ],
)
def test_every_module_imports_on_its_own(module):
    completed = subprocess.run(
        [sys.executable, "-c", f"import {module}"],
        capture_output=True,
        text=True,
    )
    assert completed.returncode == 0, completed.stderr
