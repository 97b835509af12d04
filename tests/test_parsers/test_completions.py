from therapist import (
    build_specification,
    command_arg,
    count_arg,
    file_arg,
    parse_copy,
    render_fish_completion,
    string_arg,
)

PAL_COMPLETION = """
complete -e -c pal
complete -c pal -n "__fish_seen_subcommand_from auth" -s h -d 'Show help message'
complete -c pal -n "__fish_seen_subcommand_from auth" -l help -d 'Show help message'
complete -c pal -n "__fish_seen_subcommand_from auth" -s u -d 'Username' -r
complete -c pal -n "__fish_seen_subcommand_from auth" -l user -d 'Username' -r
complete -c pal -n "__fish_seen_subcommand_from auth" -s e -d 'Email address' -r
complete -c pal -n "__fish_seen_subcommand_from auth" -l email -d 'Email address' -r
complete -c pal -n "__fish_seen_subcommand_from init" -l template -d 'Specify directory from which template will be used' -F -r
complete -c pal -n "__fish_seen_subcommand_from init" -s h -d 'Show help message'
complete -c pal -n "__fish_seen_subcommand_from init" -l help -d 'Show help message'
complete -c pal -n "__fish_seen_subcommand_from pull" -s h -d 'Show help message'
complete -c pal -n "__fish_seen_subcommand_from pull" -l help -d 'Show help message'
complete -c pal -n "__fish_seen_subcommand_from push" -s f -d 'Force push'
complete -c pal -n "__fish_seen_subcommand_from push" -l force -d 'Force push'
complete -c pal -n "__fish_seen_subcommand_from push" -s h -d 'Show help message'
complete -c pal -n "__fish_seen_subcommand_from push" -l help -d 'Show help message'
set -l SUBCOMMAND_LIST auth init pull push
complete -c pal -n "not __fish_seen_subcommand_from $SUBCOMMAND_LIST" -a "auth" -d 'Set authentication parameters'
complete -c pal -n "not __fish_seen_subcommand_from $SUBCOMMAND_LIST" -a "init" -d 'Create a new repository'
complete -c pal -n "not __fish_seen_subcommand_from $SUBCOMMAND_LIST" -a "pull" -d 'Pull changes from another repository'
complete -c pal -n "not __fish_seen_subcommand_from $SUBCOMMAND_LIST" -a "push" -d 'Push changes to another repository'
complete -c pal -n "not __fish_seen_subcommand_from $SUBCOMMAND_LIST" -s h -d 'Show help message'
complete -c pal -n "not __fish_seen_subcommand_from $SUBCOMMAND_LIST" -l help -d 'Show help message'
complete -c pal -n "not __fish_seen_subcommand_from $SUBCOMMAND_LIST" -l pager -d 'When to paginate' -f -r -a 'always auto never'
""".strip()


def test_fish_completion_option_and_command(pal_arguments):
    option = parse_copy(pal_arguments, args="--fish-completion", command="pal")
    command = parse_copy(pal_arguments, args="fish", command="pal")
    assert option.success
    assert command.success
    assert option.specification is None
    assert option.message == command.message
    assert command.message == PAL_COMPLETION


def test_completion_uses_program_name_inside_commands():
    arguments = {
        "remote": command_arg(
            "remote",
            {
                "add": command_arg(
                    "add",
                    {
                        "name": string_arg("<name>"),
                        "fetch": count_arg("-f, --fetch", help="Fetch after adding"),
                    },
                    help="Add a remote",
                ),
            },
            help="Manage remotes",
        ),
    }
    script = render_fish_completion(build_specification(arguments), "pal")
    assert script.splitlines() == [
        "complete -e -c pal",
        'complete -c pal -n "__fish_seen_subcommand_from remote; and '
        '__fish_seen_subcommand_from add" -s f -d \'Fetch after adding\'',
        'complete -c pal -n "__fish_seen_subcommand_from remote; and '
        '__fish_seen_subcommand_from add" -l fetch -d \'Fetch after adding\'',
        'complete -c pal -n "__fish_seen_subcommand_from remote; and '
        'not __fish_seen_subcommand_from add" -a "add" -d \'Add a remote\'',
        "set -l SUBCOMMAND_LIST remote",
        'complete -c pal -n "not __fish_seen_subcommand_from $SUBCOMMAND_LIST" '
        '-a "remote" -d \'Manage remotes\'',
    ]


def test_completion_without_commands():
    arguments = {
        "config": file_arg("-c, --config", help="Config file"),
        "name": string_arg("--name", help="It's a name"),
    }
    script = render_fish_completion(build_specification(arguments), "tool")
    assert script.splitlines() == [
        "complete -e -c tool",
        "complete -c tool -s c -d 'Config file' -F -r",
        "complete -c tool -l config -d 'Config file' -F -r",
        "complete -c tool -l name -d 'It\\'s a name' -r",
    ]


def test_completion_covers_paired_tokens():
    arguments = {"follow": count_arg("--[no]follow", help="Follow symlinks")}
    script = render_fish_completion(build_specification(arguments), "grape")
    assert "complete -c grape -l follow -d 'Follow symlinks'" in script
    assert "complete -c grape -l nofollow -d 'Follow symlinks'" in script
