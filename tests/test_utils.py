import pytest

from dotenv_reflect.utils import _redact_for_log


class BadRepr:
    def __repr__(self):  # pragma: no cover - used to force error path
        raise RuntimeError("nope")


@pytest.mark.parametrize("name", ["API_KEY", "db_password", "SessionToken", "client_secret"])
def test_redact_for_log_hides_secret_like_names(name):
    assert _redact_for_log(name, "value") == "***"


def test_redact_for_log_repr_for_ordinary_names():
    assert _redact_for_log("PORT", 8080) == "8080"
    assert _redact_for_log("host", "example.org") == "'example.org'"


def test_redact_for_log_unreprable():
    assert _redact_for_log("host", BadRepr()) == "<unreprable>"
