## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from optscan.types import OptionDescriptor, ParsedValue, ScanResult, LONG, SHORT, NONE, REQUIRED
from optscan.errors import (OptScanError, OptionError, OptionDeclarationError, UnknownOptionError,
                            MissingArgumentError, ExtraneousArgumentError)
from optscan.registry import Registry, describe


def test_error_messages():
    assert str(UnknownOptionError(SHORT, "x")) == 'Option "-x" is unknown.'
    assert str(UnknownOptionError(LONG, "foo")) == 'Option "--foo" is unknown.'
    assert str(MissingArgumentError(LONG, "out")) == 'Option "--out" expects an argument.'
    assert str(MissingArgumentError(SHORT, "o")) == 'Option "-o" expects an argument.'
    assert str(ExtraneousArgumentError(SHORT, "x", "123")) == 'Extraneous argument "123" passed to option "-x".'
    assert str(ExtraneousArgumentError(LONG, "quiet", "yes")) == 'Extraneous argument "yes" passed to option "--quiet".'


def test_error_discriminants_and_fields():
    err = ExtraneousArgumentError(LONG, "quiet", "yes")
    assert err.reason == "extraneous"
    assert (err.option_kind, err.option_name, err.option_argument) == (LONG, "quiet", "yes")
    assert UnknownOptionError(SHORT, "x").reason == "unknown"
    assert MissingArgumentError(SHORT, "x").reason == "missing"
    assert isinstance(err, OptionError) and isinstance(err, OptScanError)


def test_errors_compare_by_value():
    assert UnknownOptionError(SHORT, "x") == UnknownOptionError(SHORT, "x")
    assert UnknownOptionError(SHORT, "x") != UnknownOptionError(LONG, "x")
    assert UnknownOptionError(SHORT, "x") != MissingArgumentError(SHORT, "x")
    assert ExtraneousArgumentError(SHORT, "x", "a") != ExtraneousArgumentError(SHORT, "x", "b")
    assert len({UnknownOptionError(SHORT, "x"), UnknownOptionError(SHORT, "x")}) == 1


def test_descriptor_shape_is_validated():
    with pytest.raises(OptionDeclarationError):
        OptionDescriptor.short("ab")
    with pytest.raises(OptionDeclarationError):
        OptionDescriptor.short("")
    with pytest.raises(ValueError):
        OptionDescriptor.long("")
    with pytest.raises(OptionDeclarationError):
        OptionDescriptor("x", "medium")
    with pytest.raises(OptionDeclarationError):
        OptionDescriptor("x", SHORT, "optional")


def test_descriptor_defaults_and_rendering():
    assert OptionDescriptor.long("verbose").argument_type == NONE
    assert str(OptionDescriptor.long("out", REQUIRED)) == "--out="
    assert str(OptionDescriptor.short("v")) == "-v"


def test_registry_last_write_wins():
    registry = Registry()
    registry.register_all([OptionDescriptor.long("out"), OptionDescriptor.long("out", REQUIRED)])
    assert registry.lookup(LONG, "out").argument_type == REQUIRED
    assert len(registry) == 1


def test_registry_namespaces_are_separate():
    registry = Registry()
    registry.register(OptionDescriptor.short("o", REQUIRED))
    registry.register(OptionDescriptor.long("o"))
    assert registry.lookup(SHORT, "o").argument_type == REQUIRED
    assert registry.lookup(LONG, "o").argument_type == NONE
    assert registry.lookup(SHORT, "x") is None
    assert describe(registry) == ["-o=", "--o"]


def test_registry_snapshot_is_independent():
    registry = Registry()
    snapshot = registry.snapshot()
    registry.register(OptionDescriptor.short("x"))
    assert OptionDescriptor.short("x") in registry
    assert OptionDescriptor.short("x") not in snapshot


def test_scan_result_views():
    value = ParsedValue("x", SHORT, NONE, None)
    error = UnknownOptionError(LONG, "foo")
    result = ScanResult(options=(value, error), remaining=("tail",))
    assert result.values == [value]
    assert result.errors == [error]
    assert not result.ok
    with pytest.raises(UnknownOptionError):
        result.raise_for_errors()

    clean = ScanResult(options=(value,), remaining=())
    assert clean.ok
    clean.raise_for_errors()
    assert value.prefixed_name == "-x"
