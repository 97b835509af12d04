import pytest

from therapist import (
    Argument,
    SpecificationError,
    alternatives,
    build_specification,
    command_arg,
    count_arg,
    help_arg,
    help_command_arg,
    int_arg,
    message_arg,
    prompt_arg,
    string_arg,
)
from therapist.parser import ArgumentKind


def test_kinds_from_first_variant():
    spec = build_specification(
        {
            "source": string_arg("<source>", help="Source"),
            "verbose": count_arg("-v, --verbose", help="Verbosity"),
            "run": command_arg("run", {}, help="Run it"),
        }
    )
    assert spec["source"].kind is ArgumentKind.POSITIONAL
    assert spec["verbose"].kind is ArgumentKind.OPTION
    assert spec["run"].kind is ArgumentKind.COMMAND
    assert spec.argument_list == [spec["source"]]
    assert spec.option_list == [spec["verbose"]]
    assert spec.command_list == [spec["run"]]
    assert spec.options["-v"] is spec["verbose"]
    assert spec.options["run"] is spec["run"]
    assert spec.arguments["<source>"] is spec["source"]
    assert "verbose" in spec


def test_variants_from_list_or_string():
    assert string_arg(["-c", "--context"]).variants == ("-c", "--context")
    assert string_arg("-c, --context").variants == ("-c", "--context")


def test_options_and_arguments_cannot_be_mixed():
    with pytest.raises(SpecificationError):
        build_specification({"both": string_arg("-s, <source>", help="Source")})


def test_arguments_and_options_cannot_be_mixed():
    with pytest.raises(SpecificationError, match="Argument -s must be in the form"):
        build_specification({"both": string_arg("<source>, -s", help="Source")})


def test_short_options_must_be_single_letter():
    with pytest.raises(SpecificationError, match="-source"):
        build_specification({"strange": string_arg("-source", help="Source")})


def test_options_cannot_be_duplicated():
    with pytest.raises(SpecificationError, match="Option -s defined twice"):
        build_specification(
            {
                "source": string_arg("-s, --source", help="Source"),
                "secret": string_arg("-s, --secret", help="Secret"),
            }
        )


def test_down_tokens_cannot_collide():
    with pytest.raises(SpecificationError, match="Option --nofollow defined twice"):
        build_specification(
            {
                "follow": count_arg("--[no]follow", help="Follow symlinks"),
                "nofollow": count_arg("--nofollow", help="Do not follow"),
            }
        )


def test_arguments_cannot_be_duplicated():
    with pytest.raises(SpecificationError, match="Argument <file> defined twice"):
        build_specification(
            {
                "source": string_arg("<file>", help="Source"),
                "destination": string_arg("<file>", help="Destination"),
            }
        )


def test_commands_cannot_use_brackets():
    with pytest.raises(SpecificationError, match="bare words"):
        build_specification(
            {
                "verb": command_arg(
                    "<verb>", {"name": string_arg("<name>")}, help="what to do"
                ),
                "help": help_command_arg("help", help="Show help"),
            }
        )


def test_values_cannot_be_bare_words():
    with pytest.raises(SpecificationError, match="must be declared as <argument>"):
        build_specification({"name": string_arg("name", help="Name")})


def test_counts_must_be_options():
    with pytest.raises(SpecificationError, match="must be declared as an option"):
        build_specification({"verbose": count_arg("<verbose>", help="Verbose")})
    with pytest.raises(SpecificationError, match="must be declared as an option"):
        build_specification({"password": prompt_arg("password", help="Password")})


def test_commands_must_be_single_words():
    with pytest.raises(SpecificationError, match="must be a single word"):
        build_specification({"run": command_arg("run, run now", {})})


def test_paired_forms_only_for_counts():
    with pytest.raises(SpecificationError, match="paired form"):
        build_specification({"follow": string_arg("--[no]follow")})
    with pytest.raises(SpecificationError, match="paired form"):
        build_specification({"yes": int_arg("-y/-n")})


def test_required_and_optional_conflict():
    with pytest.raises(SpecificationError, match="required or optional"):
        string_arg("<name>", required=True, optional=True)


def test_variants_cannot_be_empty():
    with pytest.raises(SpecificationError, match="at least one variant"):
        string_arg("")


def test_names_cannot_be_duplicated():
    pairs = [
        ("name", string_arg("<name>")),
        ("name", string_arg("<other>")),
    ]
    with pytest.raises(SpecificationError, match="Name 'name' defined twice"):
        build_specification(pairs)


def test_items_must_be_arguments():
    with pytest.raises(SpecificationError, match="must be an Argument or Alternatives"):
        build_specification({"name": "<name>"})


def test_paired_tokens_are_registered():
    spec = build_specification(
        {
            "follow": count_arg("--[no]follow"),
            "links": count_arg("--[no-]links"),
            "filename": count_arg("-f/-F, --with-filename/--no-filename"),
        }
    )
    assert spec.options["--follow"] is spec["follow"]
    assert spec.options["--nofollow"] is spec["follow"]
    assert spec.options["--no-links"] is spec["links"]
    assert spec["filename"].tokens == ("-f", "--with-filename", "-F", "--no-filename")
    assert spec["filename"].down_variants == frozenset({"-F", "--no-filename"})


def test_help_var_derivation():
    spec = build_specification(
        {
            "context": int_arg("-C, --context"),
            "colour": string_arg("-c, --color, --colour"),
            "template": string_arg("--template", help_var="template-directory"),
            "after": int_arg("-A", help_var="<NUM>"),
            "pager": string_arg("--pager", choices=("always", "never")),
        }
    )
    assert spec["context"].help_var == "<context>"
    assert spec["colour"].help_var == "<colour>"
    assert spec["template"].help_var == "<template-directory>"
    assert spec["after"].help_var == "<NUM>"
    assert spec["pager"].help_var == "<always|never>"


def test_groups_keep_first_seen_order():
    spec = build_specification(
        {
            "pattern": string_arg("<pattern>"),
            "recursive": count_arg("-r", group="File Options"),
            "insensitive": count_arg("-i", group="Matching Options"),
            "follow": count_arg("--[no]follow", group="File Options"),
            "help": help_arg(),
        }
    )
    non_empty = [name for name, members in spec.groups.items() if members]
    assert non_empty == ["Arguments", "Options", "File Options", "Matching Options"]
    assert spec.groups["File Options"] == [spec["recursive"], spec["follow"]]


def test_alternatives_need_two_members():
    with pytest.raises(SpecificationError, match="at least two members"):
        build_specification({"only": alternatives(one=count_arg("-o"))})


def test_alternatives_members_must_be_options():
    with pytest.raises(SpecificationError, match="may only contain options"):
        build_specification(
            {"pick": alternatives(a=string_arg("<a>"), b=string_arg("<b>"))}
        )
    with pytest.raises(SpecificationError, match="value or count"):
        build_specification(
            {"pick": alternatives(a=message_arg("--a", "a"), b=count_arg("-b"))}
        )


def test_nested_specifications_are_independent():
    spec = build_specification(
        {
            "verbose": count_arg("-v, --verbose"),
            "play": command_arg("play", {"volume": count_arg("-v, --volume")}),
        }
    )
    assert spec.options["-v"] is spec["verbose"]
    assert spec["play"].specification.options["-v"] is spec["play"].specification["volume"]


def test_command_accepts_built_specification():
    nested = build_specification({"remote": string_arg("<remote>")})
    command = command_arg("push", nested, prolog="Push changes")
    assert command.specification is nested
    assert nested.prolog == "Push changes"


def test_copy_is_deep():
    spec = build_specification(
        {"play": command_arg("play", {"volume": count_arg("-v")})}
    )
    copied = spec.copy()
    assert copied["play"] is not spec["play"]
    assert copied["play"].specification["volume"] is not spec["play"].specification["volume"]
    assert isinstance(copied["play"], Argument)


def test_command_without_specification():
    with pytest.raises(SpecificationError, match="Command push has no specification"):
        build_specification({"push": Argument("push", action="command")})
