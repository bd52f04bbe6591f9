"""Interactive prompts shared by the workflows."""


def confirm(question: str = "Are you sure you want to continue?") -> bool:
    """Ask once; anything not starting with y/Y counts as no."""
    try:
        answer = input(f"{question} [y/n] ")
    except EOFError:
        return False
    return answer.strip()[:1] in ("y", "Y")


def ask(question: str) -> str:
    try:
        return input(f"{question} ").strip()
    except EOFError:
        return ""


def warning(*lines: str) -> None:
    """Print the warning banner followed by `lines`."""
    print("\n⚠️  WARNING\n")
    for line in lines:
        print(line)
    print()


def done(*lines: str) -> None:
    print("\n✅ DONE\n")
    for line in lines:
        print(line)
    if lines:
        print()


def aborted() -> int:
    print("\nAborting.\n")
    return 0
