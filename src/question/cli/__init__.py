"""Command-line front end for shell scripts."""

# Exit status when input ended early or ran out of attempts.
EXIT_NO_ANSWER = 2
