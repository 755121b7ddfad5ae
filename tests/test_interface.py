import io

import pytest

from wthr.interface import Command, Interface


@pytest.fixture
def recorder():
    calls = []

    def make(name, result=True):
        def action(argument):
            calls.append((name, argument))
            return result

        def show_help():
            calls.append((name, "help"))

        return Command(action, show_help)

    return calls, make


def test_dispatch_passes_argument(recorder):
    calls, make = recorder
    out = io.StringIO()
    interface = Interface(stdout=out)
    interface.register_command("load", make("load"))
    interface.handle_command("load data file.csv")
    assert calls == [("load", "data file.csv")]
    assert out.getvalue() == ""


def test_dispatch_without_argument(recorder):
    calls, make = recorder
    interface = Interface(stdout=io.StringIO())
    interface.register_command("exit", make("exit"))
    interface.handle_command("exit")
    assert calls == [("exit", "")]


def test_failure_reports_and_shows_help(recorder):
    calls, make = recorder
    out = io.StringIO()
    interface = Interface(stdout=out)
    interface.register_command("select", make("select", result=False))
    interface.handle_command("select year")
    assert calls == [("select", "year"), ("select", "help")]
    assert out.getvalue() == "select failed\n"


def test_unknown_command_lists_commands(recorder):
    calls, make = recorder
    out = io.StringIO()
    interface = Interface(stdout=out)
    interface.register_command("help", make("help"))
    interface.register_command("exit", make("exit"))
    interface.handle_command("nope")
    assert calls == []
    assert out.getvalue().splitlines() == ["Available commands are:", "help", "exit"]


def test_empty_line_does_nothing(recorder):
    calls, make = recorder
    out = io.StringIO()
    interface = Interface(stdout=out)
    interface.register_command("help", make("help"))
    interface.handle_command("")
    assert calls == []
    assert out.getvalue() == ""


def test_register_replaces_and_iterates(recorder):
    calls, make = recorder
    interface = Interface(stdout=io.StringIO())
    interface.register_command("a", make("first"))
    interface.register_command("b", make("b"))
    interface.register_command("a", make("second"))
    interface.handle_command("a x")
    assert calls == [("second", "x")]
    assert list(interface) == ["a", "b"]


def test_run_reads_one_line(recorder):
    calls, make = recorder
    out = io.StringIO()
    interface = Interface(stdin=io.StringIO("show temp\nexit\n"), stdout=out)
    interface.register_command("show", make("show"))
    interface.register_command("exit", make("exit"))
    interface.run("> ")
    assert calls == [("show", "temp")]
    interface.run("> ")
    assert calls == [("show", "temp"), ("exit", "")]
    assert out.getvalue() == "> > "


def test_run_raises_at_end_of_input():
    interface = Interface(stdin=io.StringIO(""), stdout=io.StringIO())
    with pytest.raises(EOFError):
        interface.run("> ")


def test_run_blank_line_is_ignored(recorder):
    calls, make = recorder
    out = io.StringIO()
    interface = Interface(stdin=io.StringIO("\n"), stdout=out)
    interface.register_command("help", make("help"))
    interface.run("> ")
    assert calls == []
    assert out.getvalue() == "> "