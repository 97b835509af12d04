"""config_loading.py"""

from pathlib import Path

from therapist import parse_or_quit
from therapist.config import loader
from therapist.console import console

specification = loader(Path(__file__).with_name("greeter.yaml"))

if __name__ == "__main__":
    parse_or_quit(specification, command="greeter")
    greeting = "Good day" if specification["tone"]["polite"].seen else "Hi"
    for _ in range(specification["times"].value):
        console.print(f"{greeting}, {specification['name'].value}!")
