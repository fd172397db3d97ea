from pathlib import Path

from civicly.classification.exceptions import ClassificationError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_instruction(path: Path | None = None) -> str:
    """Load the classification instruction sent alongside every image.

    Args:
        path: Path to the instruction file.
              Defaults to the bundled classification_prompt.txt.

    Returns:
        The instruction text without surrounding whitespace.

    Raises:
        ClassificationError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "classification_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ClassificationError(f"Failed to load classification prompt: {exc}") from exc
