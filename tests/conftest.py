import pytest

from dotenv_reflect.coercion import REGISTRY


@pytest.fixture(autouse=True)
def clean_registry():
    REGISTRY.clear()
    yield
    REGISTRY.clear()


@pytest.fixture
def env_file(tmp_path):
    def _write(*lines, name=".env"):
        path = tmp_path / name
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return path

    return _write
