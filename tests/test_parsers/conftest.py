import pytest

from therapist import (
    alternatives,
    command_arg,
    completion_arg,
    completion_command_arg,
    count_arg,
    dir_arg,
    help_arg,
    int_arg,
    string_arg,
)


@pytest.fixture
def pal_arguments():
    """An SCM with four commands, hidden completion triggers and a choices option."""
    init = {
        "destination": string_arg(
            "<destination>",
            default=".",
            optional=True,
            help="Location for new repository",
        ),
        "template_dir": dir_arg(
            "--template",
            help_var="template-directory",
            help="Specify directory from which template will be used",
        ),
        "help": help_arg(),
    }
    auth = {
        "help": help_arg(),
        "user": string_arg("-u, --user", required=True, help="Username"),
        "email": string_arg("-e, --email", help="Email address"),
    }
    pull = {
        "help": help_arg(),
        "remote": string_arg("<remote>", optional=True, help="Remote repository"),
    }
    push = {
        "destination": string_arg(
            "<remote>", help="Location of destination repository"
        ),
        "force": count_arg("-f, --force", help="Force push"),
        "help": help_arg(),
    }
    return {
        "help": help_arg(),
        "auth": command_arg(
            "auth",
            auth,
            prolog="Set authentication parameters",
            help="Set authentication parameters",
        ),
        "init": command_arg(
            "init",
            init,
            prolog="Create a new repository",
            help="Create a new repository",
        ),
        "pull": command_arg(
            "pull",
            pull,
            prolog="Pull changes from another repository to this one",
            help="Pull changes from another repository",
        ),
        "push": command_arg(
            "push",
            push,
            prolog="Push changes to another repository",
            help="Push changes to another repository",
        ),
        "pager": string_arg(
            "--pager",
            help_var="TYPE",
            help="When to paginate",
            choices=("always", "auto", "never"),
            default="auto",
        ),
        "fish_option": completion_arg(
            "--fish-completion", help="Renders a fish completion script", help_level=1
        ),
        "fish_command": completion_command_arg(
            "fish", help="Renders a fish completion script", help_level=1
        ),
    }


@pytest.fixture
def nimplayer_arguments():
    play = {
        "volume": count_arg("-v, --volume", help="Volume"),
        "start": int_arg("-s, --start", help="Start after s seconds"),
        "filename": string_arg("<filename>", help="Filename to play"),
    }
    return {
        "verbose": count_arg("-v, --verbose", help="Verbosity"),
        "play": command_arg("play", play, help="Play a file"),
        "help": help_arg(),
    }


@pytest.fixture
def navel_arguments():
    """Nested commands two levels deep, after the naval fate example."""
    create = {"name": string_arg("<name>", multi=True, help="Name of new ship")}
    move = {
        "name": string_arg("<name>", help="Name of ship to move"),
        "x": int_arg("<x>", help="x grid reference"),
        "y": int_arg("<y>", help="y grid reference"),
        "speed": int_arg("--speed", default=10, help="Speed in knots"),
        "help": help_arg(),
    }
    shoot = {
        "x": int_arg("<x>", help="x grid reference"),
        "y": int_arg("<y>", help="y grid reference"),
    }
    mine = {
        "action": string_arg(
            "<action>", choices=("set", "remove"), help="Action to perform"
        ),
        "x": int_arg("<x>", help="x grid reference"),
        "y": int_arg("<y>", help="y grid reference"),
        "state": alternatives(
            moored=count_arg("--moored", help="Moored (anchored) mine"),
            drifting=count_arg("--drifting", help="Drifting mine"),
        ),
        "help": help_arg(),
    }
    ship = {
        "create": command_arg("new", create, help="Create a new ship"),
        "move": command_arg(
            "move", move, prolog="Command to move your ship", help="Move a ship"
        ),
        "shoot": command_arg("shoot", shoot, help="Shoot at another ship"),
        "help": help_arg(),
    }
    return {
        "ship": command_arg("ship", ship, help="Ship commands"),
        "mine": command_arg("mine", mine, help="Mine commands"),
        "help": help_arg(),
    }
