"""The commands offered at the prompt and the state they share."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .interface import Command, Interface
from .models import DataScope, DataScopeState, TempTimeline, VisualMode
from .parsing import (
    SelectionError,
    handle_country,
    handle_date,
    handle_numeric,
    load_dataset,
    read_data_scope,
    read_visual_mode,
)
from .utils import tokenise
from . import visuals


@dataclass
class Environment:
    """Everything the commands read and change."""

    interface: Interface = field(default_factory=Interface)
    scope_state: DataScopeState = field(default_factory=DataScopeState)
    timelines: dict[str, TempTimeline] = field(default_factory=dict)
    datasets_dir: Path = Path("datasets")
    exit_pending: bool = False

    def __post_init__(self) -> None:
        self.datasets_dir = Path(self.datasets_dir)


def _say(env: Environment, *lines: object) -> None:
    for line in lines:
        print(line, file=env.interface.stdout)


def _dataset_names(env: Environment) -> list[str]:
    try:
        return sorted(entry.name for entry in env.datasets_dir.iterdir())
    except OSError:
        return []


def _register_exit(env: Environment) -> None:
    def action(_: str) -> bool:
        env.exit_pending = True
        return True

    def help_() -> None:
        _say(env, "[exit]", "Used to exit the application.")

    env.interface.register_command("exit", Command(action, help_))


def _register_help(env: Environment) -> None:
    def action(arg: str) -> bool:
        if not arg:
            _say(env, "Available commands:", *env.interface.commands)
            return True
        command = env.interface.commands.get(arg)
        if command is None:
            return False
        command.help()
        return True

    def help_() -> None:
        _say(
            env,
            "[help]",
            "Gives info on how to use the different commands.",
            "Usage: help <command>",
            "Available commands:",
            *env.interface.commands,
        )

    env.interface.register_command("help", Command(action, help_))


def _register_list(env: Environment) -> None:
    def action(arg: str) -> bool:
        scope = read_data_scope(arg)
        state = env.scope_state

        if scope is DataScope.UNSET:
            _say(env, "Invalid scope")
            return False
        if scope > state.scope_level + 1:
            _say(env, f"You are not in the right scope to list {arg}s.")
            return False
        if scope is DataScope.COUNTRY:
            _say(env, *env.timelines)
            return True

        timeline = env.timelines[state.country_code]
        ts = state.time_data
        if scope is DataScope.YEAR:
            _say(env, *(key.year for key in timeline.yearly_readings))
        elif scope is DataScope.MONTH:
            _say(env, *(
                key.month for key in timeline.monthly_readings if key.year == ts.year
            ))
        elif scope is DataScope.DAY:
            _say(env, *(
                key.day
                for key in timeline.daily_readings
                if (key.year, key.month) == (ts.year, ts.month)
            ))
        else:
            _say(env, *(
                key.hour
                for key in timeline.hourly_readings
                if (key.year, key.month, key.day) == (ts.year, ts.month, ts.day)
            ))
        return True

    def help_() -> None:
        _say(
            env,
            "[list]",
            "Used to list available datapoint for each scope.",
            "Usage: list <scope>",
            "Avalable scopes are: country, year, month, day, hour",
        )

    env.interface.register_command("list", Command(action, help_))


def _register_load(env: Environment) -> None:
    def action(arg: str) -> bool:
        file_name = arg
        if not file_name:
            names = _dataset_names(env)
            file_name = names[0] if names else ""

        try:
            if not file_name:
                raise FileNotFoundError("no dataset available")
            loaded = load_dataset(env.datasets_dir / file_name)
        except (OSError, ValueError):
            _say(env, "Encoutered an error while loading the dataset.")
            return False

        env.timelines.update(loaded)
        env.timelines = dict(sorted(env.timelines.items()))
        first = next(iter(env.timelines.values()), None)
        count = len(first.hourly_readings) if first is not None else 0
        _say(env, f"Loaded {count} data points")
        return True

    def help_() -> None:
        _say(
            env,
            "[load]",
            "Used to load a dataset inside the datasets directory.",
            "Usage: load <file name>",
            "The available datasets are:",
            *_dataset_names(env),
        )

    env.interface.register_command("load", Command(action, help_))


def _register_scope(env: Environment) -> None:
    def action(_: str) -> bool:
        if not env.timelines:
            _say(env, "No datasets have been loaded.")
            return False

        state = env.scope_state
        level = state.scope_level
        ts = state.time_data
        lines = [
            (DataScope.COUNTRY, f"Country: {state.country_code}"),
            (DataScope.YEAR, f"Year: {ts.year}"),
            (DataScope.MONTH, f"Month: {ts.month}"),
            (DataScope.DAY, f"Day: {ts.day}"),
            (DataScope.HOUR, f"Hour: {ts.hour}"),
        ]
        _say(env, *(text for needed, text in lines if level >= needed))
        return True

    def help_() -> None:
        _say(env, "[scope]", "Used to get info on the current scope.")

    env.interface.register_command("scope", Command(action, help_))


def _register_select(env: Environment) -> None:
    def action(args: str) -> bool:
        split_args = tokenise(args, " ")
        state = env.scope_state

        if not env.timelines:
            _say(env, "No datasets have been loaded.")
            return False
        if not split_args:
            return False

        if split_args[0] == "date":
            scope = DataScope.YEAR
        else:
            scope = read_data_scope(split_args[0])
            # Scoping out needs no identifier.
            if len(split_args) == 1 and scope < state.scope_level:
                state.scope_level = scope
                return True

        if len(split_args) != 2:
            return False

        if scope > state.scope_level + 1:
            _say(env, f"You are not in the right scope to select {split_args[0]}s.")
            return False

        identifier = split_args[1]
        try:
            if scope <= DataScope.COUNTRY:
                handle_country(identifier, env.timelines, state)
                return True
            timeline = env.timelines[state.country_code]
            if split_args[0] == "date":
                handle_date(identifier, timeline, state)
            else:
                handle_numeric(identifier, scope, timeline, state)
        except SelectionError as error:
            _say(env, error)
            return False
        return True

    def help_() -> None:
        _say(
            env,
            "[select]",
            "Used to select a scope.",
            "Usage: select <scope> <id>",
            "<id> does not need to be specified when scoping out.",
            "Available scopes are: country, date, year, month, day, hour",
        )

    env.interface.register_command("select", Command(action, help_))


def _register_show(env: Environment) -> None:
    def action(args: str) -> bool:
        state = env.scope_state
        level = state.scope_level
        if level < DataScope.COUNTRY:
            _say(env, "No country selected.")
            return False

        split_args = tokenise(args, " ")
        if not split_args:
            _say(env, "Please select a visual mode.")
            return False

        mode = read_visual_mode(split_args[0])
        timeline = env.timelines[state.country_code]

        try:
            if mode is VisualMode.TEMP:
                if level <= DataScope.COUNTRY:
                    _say(env, "Scope level is too low.")
                    return False
                _say(env, f"{visuals.temp(timeline, state):g}C")
                return True

            if mode is VisualMode.PLOT:
                if level >= DataScope.HOUR:
                    _say(env, "Scope level is too high.")
                    return False
                _say(env, visuals.plot(timeline, state).render())
                return True

            if mode is VisualMode.PREDICTION:
                if level >= DataScope.HOUR:
                    _say(env, "Scope level is too high.")
                    return False
                try:
                    count = int(split_args[1]) if len(split_args) == 2 else 12
                except ValueError:
                    _say(env, "Invalid prediction count.")
                    return False
                _say(env, visuals.prediction(timeline, state, count).render())
                return True

            if mode is VisualMode.CANDLESTICK:
                if level >= DataScope.DAY:
                    _say(env, "Scope level is too high.")
                    return False
                _say(env, visuals.candlesticks(timeline, state).render())
                return True
        except ValueError as error:
            _say(env, error)
            return False

        _say(env, "Select a valid mode.")
        return False

    def help_() -> None:
        _say(
            env,
            "[show]",
            "Used to display temperature data.",
            "Available visuals are: temp, plot, prediction, candles",
        )

    env.interface.register_command("show", Command(action, help_))


def register_commands(env: Environment) -> None:
    """Register every prompt command with the environment's interface."""
    _register_exit(env)
    _register_help(env)
    _register_list(env)
    _register_load(env)
    _register_select(env)
    _register_scope(env)
    _register_show(env)