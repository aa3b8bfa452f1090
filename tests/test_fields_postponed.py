from __future__ import annotations

from typing import ClassVar, ForwardRef

import pytest
from typing_extensions import Annotated, Final

from dotenv_reflect.binding import bind
from dotenv_reflect.exceptions import ImmutableFieldError, UnresolvedFieldTypeError
from dotenv_reflect.fields import DoNotBind, EnvItem, describe_fields
from dotenv_reflect.store import KeyValueStore


class Postponed:
    port: Annotated[int, EnvItem(key="PORT")] = 0
    host: str = ""


def test_string_annotations_are_resolved():
    port, host = describe_fields(Postponed)
    assert port.type is int
    assert port.effective_key == "PORT"
    assert host.type is str


def test_unresolvable_name_becomes_forward_ref():
    class Broken:
        thing: DoesNotExist = None  # noqa: F821

    (field,) = describe_fields(Broken)
    assert isinstance(field.type, ForwardRef)
    assert field.type.__forward_arg__ == "DoesNotExist"


def test_local_type_does_not_break_other_fields():
    class Local:
        pass

    class Settings:
        port: int = 0
        other: Annotated[Local, DoNotBind] = None
        VERSION: Final[str] = "1.0"
        shared: ClassVar[bool] = False
        local: Local = None

    fields = {f.name: f for f in describe_fields(Settings)}
    assert fields["port"].type is int
    assert fields["other"].skip is True
    assert fields["VERSION"].type is str and fields["VERSION"].writable is False
    assert fields["shared"].type is bool and fields["shared"].class_level is True
    assert isinstance(fields["local"].type, ForwardRef)


def test_bind_with_local_type_keeps_native_skip_and_final_contracts():
    class Local:
        pass

    class Settings:
        port: int = 0
        other: Annotated[Local, DoNotBind] = None

    bound = bind(Settings, KeyValueStore.from_lines(["port=8080", "other=x"]))
    assert bound == {"port": 8080}
    assert Settings.other is None

    class Versioned:
        VERSION: Final[str] = "1.0"
        extra: Local = None

    with pytest.raises(ImmutableFieldError):
        bind(Versioned, KeyValueStore.from_lines(["VERSION=2.0"]))

    with pytest.raises(UnresolvedFieldTypeError) as excinfo:
        bind(Versioned, KeyValueStore.from_lines(["extra=x"]))
    assert excinfo.value.field == "extra"
