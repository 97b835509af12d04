"""pal.py"""

from therapist import (
    command_arg,
    completion_arg,
    count_arg,
    dir_arg,
    help_arg,
    parse_or_quit,
    prompt_arg,
    string_arg,
)
from therapist.console import console


def push(specification):
    force = " (forced)" if specification["force"].seen else ""
    console.print(f"Pushing to {specification['remote'].value}{force}")


def init(specification):
    console.print(f"Initialising repository in {specification['destination'].value}")


arguments = {
    "help": help_arg(),
    "init": command_arg(
        "init",
        {
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
        },
        prolog="Create a new repository",
        help="Create a new repository",
        handler=init,
    ),
    "auth": command_arg(
        "auth",
        {
            "user": string_arg("-u, --user", required=True, help="Username"),
            "password": prompt_arg(
                "-p, --password", prompt="Password: ", secret=True, help="Ask for a password"
            ),
            "help": help_arg(),
        },
        help="Set authentication parameters",
    ),
    "push": command_arg(
        "push",
        {
            "remote": string_arg("<remote>", help="Location of destination repository"),
            "force": count_arg("-f, --force", help="Force push"),
            "help": help_arg(),
        },
        prolog="Push changes to another repository",
        help="Push changes to another repository",
        handler=push,
    ),
    "fish": completion_arg("--fish-completion", help_level=1),
}

if __name__ == "__main__":
    parse_or_quit(
        arguments,
        prolog="An SCM that doesn't hate you",
        epilog="For more detail on e.g. the init command, run 'pal init --help'",
        command="pal",
    )
