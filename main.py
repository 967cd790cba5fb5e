#!/usr/bin/env python3
"""
Docker Command
Application entry point
"""

from docker_command.cli import main


if __name__ == "__main__":
    main()
