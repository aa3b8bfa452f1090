from typing import Dict, Final

from typing_extensions import Annotated

from dotenv_reflect.binding import FieldBinder
from dotenv_reflect.fields import DoNotBind, EnvItem, describe_fields
from dotenv_reflect.store import KeyValueStore
from dotenv_reflect.template import TemplateGenerator, generate, render_mapping


def test_generate_exact_shape():
    class Settings:
        key: Annotated[str, EnvItem(comment="API key", value="")] = ""
        timeout: Annotated[int, EnvItem(value="30")] = 0

    assert generate(Settings) == "# API key\nkey=\ntimeout=30\n"


def test_generate_includes_skipped_and_final_fields():
    class Settings:
        cache: Annotated[Dict[str, str], DoNotBind] = {}
        VERSION: Final[str] = "1.0"
        host: str = "localhost"

    assert TemplateGenerator().generate(Settings) == "cache=\nVERSION=\nhost=\n"


def test_generate_uses_override_key_and_ignores_runtime_values():
    class Settings:
        token: Annotated[str, EnvItem(key="API_TOKEN", comment="Issued by ops")] = "s3cr3t"

    assert generate(Settings) == "# Issued by ops\nAPI_TOKEN=\n"


def test_generate_accepts_instances_and_empty_classes():
    class Empty:
        pass

    class Settings:
        a: int = 1

    assert generate(Empty) == ""
    assert generate(Settings()) == "a=\n"


def test_generated_keys_match_binding_keys():
    class Settings:
        plain: str = ""
        renamed: Annotated[str, EnvItem(key="RENAMED")] = ""
        commented: Annotated[int, EnvItem(comment="c", value="1")] = 0
        skipped: Annotated[str, EnvItem(key="SKIP_KEY"), DoNotBind] = ""

    template = generate(Settings)
    emitted = [line.split("=", 1)[0] for line in template.splitlines() if "=" in line]
    assert emitted == [f.effective_key for f in describe_fields(Settings)]

    # feeding the template back in binds every non-skipped field it names
    values = [f"{key}=7" for key in emitted]
    bound = FieldBinder().bind(Settings, KeyValueStore.from_lines(values))
    assert set(bound) == {"plain", "renamed", "commented"}
    assert Settings.renamed == "7" and Settings.commented == 7


def test_template_round_trips_through_store(tmp_path):
    class Settings:
        host: Annotated[str, EnvItem(comment="Hostname", value="localhost")] = ""
        port: Annotated[int, EnvItem(value="8080")] = 0

    path = tmp_path / ".env"
    path.write_text(generate(Settings), encoding="utf-8")
    store = KeyValueStore(path)
    assert store.as_map() == {"host": "localhost", "port": "8080"}


def test_render_mapping_preserves_order():
    assert render_mapping({"b": "2", "a": "x=y"}) == "b=2\na=x=y\n"
    assert render_mapping({}) == ""
