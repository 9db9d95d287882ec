# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Tests for the API error handlers."""

import pytest
from src.api.errors import BODY_REQUIRED_MESSAGE, validation_error_detail


class TestValidationErrorDetail:
    """Tests for validation_error_detail."""

    @pytest.mark.parametrize(
        "errors, expected",
        [
            (
                [{"type": "missing", "loc": ("body",), "msg": "Field required"}],
                BODY_REQUIRED_MESSAGE,
            ),
            (
                [{"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error"}],
                "Invalid request: JSON decode error",
            ),
            (
                [
                    {
                        "type": "bool_parsing",
                        "loc": ("body", "success"),
                        "msg": "Input should be a valid boolean",
                    }
                ],
                "Invalid request: success: Input should be a valid boolean",
            ),
            (
                [{"type": "missing", "loc": ("query", "days"), "msg": "Field required"}],
                "Invalid request: query.days: Field required",
            ),
            ([], "Invalid request"),
        ],
    )
    def test_detail(self, errors: list, expected: str) -> None:
        assert validation_error_detail(errors) == expected
