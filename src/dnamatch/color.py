# ANSI escape codes for coloured console messages


class fg:
    """Foreground colours."""
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    RESET = "\033[39m"
