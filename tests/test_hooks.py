from pathlib import Path

import pytest

import obama64
from obama64 import (
    HOOK_REGISTRY,
    DomainViolationError,
    FunctionHook,
    InvalidBluffCodeError,
    InvalidTransformHookError,
    TransformHook,
    XorHook,
    check_transform_hook,
)


def test_default_hook_is_xor(codec):
    assert isinstance(codec.transform_hook, XorHook)
    assert codec.transform_hook.transform(0x41, 0x43) == 0x02


def test_plugins_registered(plugins):
    assert set(plugins) == {"halfswap", "xor7"}
    assert {"xor", "halfswap", "xor7"} <= set(HOOK_REGISTRY)
    assert isinstance(HOOK_REGISTRY["halfswap"], TransformHook)


def test_plugin_hooks_pass_validation():
    for name in ("xor", "halfswap", "xor7"):
        check_transform_hook(HOOK_REGISTRY[name])


def test_function_hook(codec):
    hook = FunctionHook(lambda v, s: v ^ 0x55, lambda v, s: v ^ 0x55, name="xor55")
    codec.transform_hook = hook
    assert codec.transform_hook is hook
    assert codec.transform_hook.name == "xor55"
    assert codec.decode(codec.encode(b"\x00hook\xff")) == b"\x00hook\xff"


@pytest.mark.parametrize("transform, untransform", [
    (lambda v, s: v & 0x7E, lambda v, s: v),
    (lambda v, s: v + 1, lambda v, s: v - 1),
    (lambda v, s: v ^ 0x80, lambda v, s: v ^ 0x80),
    (lambda v, s: 1 // (v - 5), lambda v, s: v),
])
def test_bad_hook_rejected_and_previous_kept(codec, transform, untransform):
    previous = codec.transform_hook
    with pytest.raises(InvalidTransformHookError):
        codec.transform_hook = FunctionHook(transform, untransform, name="broken")
    assert codec.transform_hook is previous
    assert codec.encode(b"abc") == b"CPHoH"


def test_hook_errors_are_value_errors():
    with pytest.raises(ValueError):
        check_transform_hook(FunctionHook(lambda v, s: 0, lambda v, s: 0))


def test_invalid_bluff_code_keeps_previous(codec):
    with pytest.raises(InvalidBluffCodeError):
        codec.bluff_code = ord("!")
    with pytest.raises(InvalidBluffCodeError):
        codec.bluff_code = 200
    assert codec.bluff_code == obama64.DEFAULT_BLUFF_CODE


def test_load_plugins_without_manifest(tmp_path):
    (tmp_path / "stray.py").write_text("raise RuntimeError('never loaded')\n")
    assert obama64.load_plugins(tmp_path) == []


def test_load_plugins_missing_dir(tmp_path):
    assert obama64.load_plugins(tmp_path / "nope") == []


def test_load_plugins_reports_unregistered_hook(tmp_path):
    (tmp_path / "manifest.json").write_text(
        '{"plugins": [{"file": "quiet.py", "hook": "quiet"}, {"file": "gone.py"}]}')
    (tmp_path / "quiet.py").write_text("VALUE = 1\n")
    assert obama64.load_plugins(tmp_path) == []


def test_load_plugins_custom_hook(tmp_path):
    (tmp_path / "manifest.json").write_text('{"plugins": [{"file": "rot.py", "hook": "rot5"}]}')
    (tmp_path / "rot.py").write_text(
        "@register_hook\n"
        "class Rot5(TransformHook):\n"
        "    name = 'rot5'\n"
        "    description = 'rotate by five'\n"
        "    def transform(self, value, secret):\n"
        "        return (value + 5) % 128\n"
        "    def untransform(self, value, secret):\n"
        "        return (value - 5) % 128\n"
    )
    try:
        assert obama64.load_plugins(tmp_path) == ["rot5"]
        check_transform_hook(HOOK_REGISTRY["rot5"])
    finally:
        HOOK_REGISTRY.pop("rot5", None)


def test_default_plugin_dir_ships_with_package():
    assert (Path(obama64.__file__).parent / "plugins" / "manifest.json").is_file()
    assert obama64.load_plugins() == ["halfswap", "xor7"]


def test_rejected_hook_is_logged(codec, capsys, monkeypatch):
    monkeypatch.setattr(obama64, "VERBOSE", True)
    with pytest.raises(InvalidTransformHookError):
        codec.transform_hook = FunctionHook(lambda v, s: v + 1, lambda v, s: v, name="off_by_one")
    assert "[WARN] Rejected transform hook: Hook 'off_by_one'" in capsys.readouterr().err


def test_hook_leaving_range_under_other_secret(codec):
    codec.transform_hook = FunctionHook(
        lambda v, s: v if s == 0x43 else v + 128,
        lambda v, s: v if s == 0x43 else v - 128,
        name="secret_sensitive",
    )
    assert codec.decode(codec.encode(b"abc")) == b"abc"
    codec.bluff_code = ord("-")
    with pytest.raises(DomainViolationError):
        codec.encode(b"abc")
    with pytest.raises(DomainViolationError):
        codec.decode(b"-PP")
