import logging

import pytest

from greyhack_mcp.greyhack import transpile_greyscript


def test_placeholder_reports_input_length():
    code = 'print("hello")'
    result = transpile_greyscript({"code": code})

    assert result["original"] == code
    assert result["success"] is True
    assert result["implemented"] is False
    assert f"// Original code length: {len(code)} characters" in result["transpiled"]
    assert result["transpiled"].startswith("// Transpiled from GreyScript to JavaScript\nfunction main() {")


def test_placeholder_logs_that_it_is_not_implemented(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.WARNING):
        transpile_greyscript({"code": ""})

    assert "not implemented" in caplog.text
