"""navel_fate.py"""

from therapist import (
    alternatives,
    command_arg,
    count_arg,
    help_arg,
    int_arg,
    message_arg,
    parse_copy,
    string_arg,
)
from therapist.console import console, error_console

ship = {
    "new": command_arg(
        "new",
        {"name": string_arg("<name>", multi=True, help="Name of new ship")},
        help="Create a new ship",
    ),
    "move": command_arg(
        "move",
        {
            "name": string_arg("<name>", help="Name of ship to move"),
            "x": int_arg("<x>", help="x grid reference"),
            "y": int_arg("<y>", help="y grid reference"),
            "speed": int_arg("--speed", default=10, help="Speed in knots"),
            "help": help_arg(),
        },
        help="Move a ship",
    ),
    "shoot": command_arg(
        "shoot",
        {
            "x": int_arg("<x>", help="x grid reference"),
            "y": int_arg("<y>", help="y grid reference"),
        },
        help="Shoot at another ship",
    ),
    "help": help_arg(),
}

arguments = {
    "ship": command_arg("ship", ship, help="Ship commands"),
    "mine": command_arg(
        "mine",
        {
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
        },
        help="Mine commands",
    ),
    "version": message_arg("--version", "Naval Fate 2.0", help="Show version"),
    "help": help_arg(),
}

if __name__ == "__main__":
    # The same arguments can be parsed repeatedly with parse_copy.
    for line in ("ship new Guardian Titanic", "ship move Guardian 10 50", "mine sett 1 2"):
        result = parse_copy(arguments, args=line, command="naval_fate")
        if not result.success:
            error_console.print(f"{line}: {result.message}", markup=False)
            continue
        spec = result.specification
        if spec["ship"].seen:
            nested = spec["ship"].specification
            if nested["new"].seen:
                console.print("New ships:", nested["new"].specification["name"].values)
            elif nested["move"].seen:
                move = nested["move"].specification
                console.print(
                    f"Moving {move['name'].value} to ({move['x'].value}, "
                    f"{move['y'].value}) at {move['speed'].value} knots"
                )
