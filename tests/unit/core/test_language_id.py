from __future__ import annotations

import pytest

from modules.core.exceptions import LanguageConstraintException
from modules.core.value_objects import LanguageId

pytestmark = pytest.mark.unit


class TestLanguageId:
    def test_equality_by_value(self):
        assert LanguageId(1) == LanguageId(1)

    @pytest.mark.parametrize("value", [0, -1, "1", None])
    def test_rejects_invalid_values(self, value):
        with pytest.raises(LanguageConstraintException):
            LanguageId(value)
