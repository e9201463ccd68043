#!/usr/bin/env python3
"""

"""
from __future__ import annotations

import logging as logmod

import pytest
from pydantic import ValidationError
logging = logmod.root

from pgm_parms.enums import ParamKind_e
from pgm_parms._structs.param_spec import ParamSpec

class TestParamSpec:

    def test_sanity(self):
        assert(True is not False)

    def test_initial(self):
        obj = ParamSpec(name="debug")
        assert(obj.name == "debug")
        assert(obj.default == "")
        assert(obj.kind is ParamKind_e.named)
        assert(not obj.positional)

    def test_build_from_str(self):
        obj = ParamSpec.build("debug=0")
        assert(obj.name == "debug")
        assert(obj.default == "0")

    def test_build_bare_name(self):
        obj = ParamSpec.build("user", kind=ParamKind_e.positional)
        assert(obj.name == "user")
        assert(obj.default == "")
        assert(obj.positional)

    def test_build_from_dict(self):
        obj = ParamSpec.build({"name": "machine", "default": "denali", "desc": "The machine"}, kind=ParamKind_e.positional)
        assert(obj.default == "denali")
        assert(obj.desc == "The machine")
        assert(obj.positional)

    def test_build_changes_kind(self):
        orig = ParamSpec(name="a")
        obj  = ParamSpec.build(orig, kind=ParamKind_e.positional)
        assert(obj is not orig)
        assert(obj.positional)
        assert(not orig.positional)

    def test_build_same_kind_is_same(self):
        orig = ParamSpec(name="a")
        assert(ParamSpec.build(orig) is orig)

    def test_build_bad_data(self):
        with pytest.raises(TypeError):
            ParamSpec.build(5)

    def test_empty_name_fails(self):
        with pytest.raises(ValidationError):
            ParamSpec(name="")

    def test_default_coercion(self):
        assert(ParamSpec(name="a", default=5).default == "5")
        assert(ParamSpec(name="a", default=True).default == "1")
        assert(ParamSpec(name="a", default=None).default == "")

    def test_key_str(self):
        assert(ParamSpec(name="debug").key_str == "--debug")
        assert(ParamSpec(name="debug", data_desc="0/1").key_str == "--debug=<0/1>")
        assert(ParamSpec(name="machine", kind=ParamKind_e.positional).key_str == "MACHINE")

    def test_repr(self):
        assert(repr(ParamSpec(name="debug")) == "<ParamSpec: --debug>")
        assert(repr(ParamSpec(name="machine", kind=ParamKind_e.positional)) == "<ParamSpec: machine>")
