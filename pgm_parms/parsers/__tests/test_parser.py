#!/usr/bin/env python3
"""

"""
from __future__ import annotations

import logging as logmod
import sys

import pytest
logging = logmod.root

from tomlguard import TomlGuard

from pgm_parms.control.catalog import ParmContext
from pgm_parms.enums import ParseStatus_e
from pgm_parms.errors import UnrecognizedParamError
from pgm_parms.parsers.parser import ParseResult, PgmParmParser

@pytest.fixture(scope="function")
def ctx():
    ctx = ParmContext()
    ctx.longoptions("debug=0", "quiet=0")
    ctx.pos_parms("machine", "user")
    return ctx

class TestParseResult:

    def test_sanity(self):
        assert(True is not False)

    def test_ok(self):
        obj = ParseResult(status=ParseStatus_e.completed)
        assert(obj.ok)
        assert(obj.check() is obj)

    def test_not_ok(self):
        obj = ParseResult(status=ParseStatus_e.help)
        assert(not obj.ok)

    def test_check_raises(self):
        err = UnrecognizedParamError("%s is an unrecognized parameter.", "blah")
        obj = ParseResult(status=ParseStatus_e.error, error=err)
        with pytest.raises(UnrecognizedParamError):
            obj.check()

    def test_to_guard(self):
        obj   = ParseResult(status=ParseStatus_e.completed, values={"machine": "denali"})
        guard = obj.to_guard()
        assert(isinstance(guard, TomlGuard))
        assert(guard.machine == "denali")

class TestPgmParmParser:

    def test_sanity(self):
        assert(True is not False)

    def test_basic(self, ctx):
        result = PgmParmParser(ctx).parse(["--debug", "denali", "alice"], program="prog")
        assert(result.status is ParseStatus_e.completed)
        assert(ctx.symbols['debug'] == "1")
        assert(ctx.symbols['quiet'] == "0")
        assert(ctx.symbols['machine'] == "denali")
        assert(ctx.symbols['user'] == "alice")
        assert(result.parm_list == ("debug", "machine", "user"))

    def test_no_args(self, ctx):
        result = PgmParmParser(ctx).parse([], program="prog")
        assert(result.ok)
        assert(result.parm_list == ())
        assert(result.command_line == "prog")
        assert(ctx.symbols['debug'] == "0")

    def test_command_line(self, ctx):
        result = PgmParmParser(ctx).parse(["--debug", "denali", "alice"], program="prog")
        assert(result.command_line == "prog --debug denali alice")
        assert(ctx.command_line == "prog --debug denali alice")

    def test_context_records_result(self, ctx):
        result = PgmParmParser(ctx).parse(["denali"], program="prog")
        assert(ctx.last_result is result)
        assert(ctx.parm_list == ["machine"])

    def test_values_snapshot(self, ctx):
        result = PgmParmParser(ctx).parse(["denali"], program="prog")
        ctx.symbols['machine'] = "other"
        assert(result.values['machine'] == "denali")

    def test_named_with_value(self, ctx):
        PgmParmParser(ctx).parse(["--quiet=2"], program="prog")
        assert(ctx.symbols['quiet'] == "2")

    def test_named_empty_value(self, ctx):
        PgmParmParser(ctx).parse(["--debug="], program="prog")
        assert(ctx.symbols['debug'] == "")

    def test_named_value_with_delim(self, ctx):
        ctx.longoptions("name")
        PgmParmParser(ctx).parse(["--name=val=x"], program="prog")
        assert(ctx.symbols['name'] == "val=x")

    @pytest.mark.parametrize("token", ["debug", "-debug", "--debug", "----debug"])
    def test_any_number_of_dashes(self, ctx, token):
        result = PgmParmParser(ctx).parse([token], program="prog")
        assert(ctx.symbols['debug'] == "1")
        assert(result.parm_list == ("debug",))

    def test_positional_defaults_kept(self):
        ctx = ParmContext()
        ctx.pos_parms("machine=denali", "user=bob")
        PgmParmParser(ctx).parse(["ozzy"], program="prog")
        assert(ctx.symbols['machine'] == "ozzy")
        assert(ctx.symbols['user'] == "bob")

    def test_unknown_option_fills_positional(self, ctx):
        result = PgmParmParser(ctx).parse(["--other=3"], program="prog")
        assert(result.ok)
        assert(ctx.symbols['machine'] == "other=3")

    def test_parm_list_keeps_duplicates(self, ctx):
        result = PgmParmParser(ctx).parse(["--debug", "denali", "--debug=0", "alice"], program="prog")
        assert(result.parm_list == ("debug", "machine", "debug", "user"))
        assert(ctx.symbols['debug'] == "0")

    def test_named_first_tie_break(self):
        ctx = ParmContext()
        ctx.longoptions("machine=0")
        ctx.pos_parms("machine", "user")
        result = PgmParmParser(ctx).parse(["--machine=x"], program="prog")
        assert(result.parm_list == ("machine",))
        assert(ctx.symbols['machine'] == "x")
        assert(ctx.symbols['user'] == "")

class TestAccumulation:

    def test_sanity(self):
        assert(True is not False)

    @pytest.mark.parametrize("args,expected", [
        (["denali"], "denali"),
        (["denali", "bob"], "denali bob"),
        (["denali", "bob", "carol"], "denali bob carol"),
    ])
    def test_single_positional_accumulates(self, args, expected):
        ctx = ParmContext()
        ctx.pos_parms("machine")
        result = PgmParmParser(ctx).parse(args, program="prog")
        assert(result.ok)
        assert(ctx.symbols['machine'] == expected)
        assert(result.parm_list == tuple(["machine"] * len(args)))

    def test_last_positional_accumulates(self, ctx):
        result = PgmParmParser(ctx).parse(["denali", "bob", "carol"], program="prog")
        assert(ctx.symbols['machine'] == "denali")
        assert(ctx.symbols['user'] == "bob carol")
        assert(result.parm_list == ("machine", "user", "user"))

    def test_named_between_accumulation(self, ctx):
        PgmParmParser(ctx).parse(["denali", "bob", "--debug", "carol"], program="prog")
        assert(ctx.symbols['user'] == "bob carol")
        assert(ctx.symbols['debug'] == "1")

    @pytest.mark.parametrize("args,expected", [
        (["a.txt", "my file.txt"], "a.txt my file.txt"),
        (["my file.txt", "b"], "my file.txt b"),
    ])
    def test_accumulate_token_with_delim(self, args, expected):
        ctx = ParmContext()
        ctx.pos_parms("files")
        result = PgmParmParser(ctx).parse(args, program="prog")
        assert(result.ok)
        assert(ctx.symbols['files'] == expected)
        assert(result.parm_list == ("files", "files"))

    def test_accumulate_onto_empty_value(self):
        ctx = ParmContext()
        ctx.pos_parms("files")
        PgmParmParser(ctx).parse(["", "b"], program="prog")
        assert(ctx.symbols['files'] == "b")

    def test_queue_restarts_each_parse(self, ctx):
        parser = PgmParmParser(ctx)
        parser.parse(["denali", "bob"], program="prog")
        parser.parse(["ozzy"], program="prog")
        assert(ctx.symbols['machine'] == "ozzy")
        assert(ctx.symbols['user'] == "bob")

class TestHelpAndErrors:

    def test_sanity(self):
        assert(True is not False)

    @pytest.mark.parametrize("token", ["-h", "--help", "-help", "--help=1", "--help=5"])
    def test_help_requested(self, ctx, token):
        result = PgmParmParser(ctx).parse([token], program="prog")
        assert(result.status is ParseStatus_e.help)
        assert(result.parm_list == ("help",))

    def test_help_stops_parsing(self, ctx):
        result = PgmParmParser(ctx).parse(["-h", "--debug", "denali"], program="prog")
        assert(result.status is ParseStatus_e.help)
        assert(ctx.symbols['debug'] == "0")
        assert(ctx.symbols['machine'] == "")

    @pytest.mark.parametrize("token", ["--help=0", "--help=no", "--help="])
    def test_falsy_help_continues(self, ctx, token):
        result = PgmParmParser(ctx).parse([token, "--debug"], program="prog")
        assert(result.ok)
        assert(ctx.symbols['debug'] == "1")
        assert(result.parm_list == ("help", "debug"))

    def test_help_needs_no_registration(self):
        ctx    = ParmContext()
        result = PgmParmParser(ctx).parse(["-h"], program="prog")
        assert(result.status is ParseStatus_e.help)

    def test_empty_catalogs_error(self):
        ctx    = ParmContext()
        result = PgmParmParser(ctx).parse(["blah"], program="prog")
        assert(result.status is ParseStatus_e.error)
        assert(isinstance(result.error, UnrecognizedParamError))
        assert(result.error.parm_name == "blah")
        assert(str(result.error) == "blah is an unrecognized parameter.")
        with pytest.raises(UnrecognizedParamError):
            result.check()

    def test_unknown_named_with_no_positionals(self):
        ctx = ParmContext()
        ctx.longoptions("debug=0")
        result = PgmParmParser(ctx).parse(["--debug", "--other=2", "--debug=0"], program="prog")
        assert(result.status is ParseStatus_e.error)
        assert(result.error.parm_name == "other")
        assert(result.parm_list == ("debug",))
        assert(ctx.symbols['debug'] == "1")

class TestDefaults:

    def test_sanity(self):
        assert(True is not False)

    def test_args_default_to_argv(self, ctx, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["prog", "--debug", "denali"])
        result = PgmParmParser(ctx).parse(program="prog")
        assert(ctx.symbols['debug'] == "1")
        assert(ctx.symbols['machine'] == "denali")
        assert(result.command_line == "prog --debug denali")

    def test_program_defaults_to_path(self, ctx):
        result = PgmParmParser(ctx).parse(["denali"])
        assert(result.command_line.endswith(" denali"))
        assert(result.command_line.startswith("/"))

    def test_custom_config(self):
        ctx = ParmContext(config=TomlGuard({"parse": {"list_delim": ","}}))
        ctx.pos_parms("machine")
        PgmParmParser(ctx).parse(["denali", "bob"], program="prog")
        assert(ctx.symbols['machine'] == "denali,bob")
