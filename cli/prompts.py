"""Yes/no prompting for the terminal."""

from typing import Callable

ANSWERS = {"y": True, "yes": True, "n": False, "no": False}

ReadFunc = Callable[[str], str]
WriteFunc = Callable[[str], None]


def ask_yes_no(question: str, read: ReadFunc = input, write: WriteFunc = print) -> bool:
    """
    Ask until the answer is y, n, yes or no (case-insensitive).

    A blank line asks again silently. Other answers are reported and the
    question is asked again; nothing is raised to the caller. End of
    input answers no.

    Args:
        question: Prompt text, e.g. "Hit? (y/n) "
        read: Reads one line after showing the prompt
        write: Writes one line of feedback

    Returns:
        True for yes, False for no
    """
    while True:
        try:
            answer = read(question)
        except EOFError:
            write("")
            return False
        except UnicodeDecodeError:
            write("Wrong input type! Try again.")
            write("")
            continue

        answer = answer.strip().lower()
        if not answer:
            continue
        if answer in ANSWERS:
            write("")
            return ANSWERS[answer]

        write("Incorrect character! Try again.")
        write("")


def want_to_hit(read: ReadFunc = input, write: WriteFunc = print) -> bool:
    return ask_yes_no("Hit? (y/n) ", read, write)


def want_to_play_again(read: ReadFunc = input, write: WriteFunc = print) -> bool:
    return ask_yes_no("Want to play again? (y/n) ", read, write)
