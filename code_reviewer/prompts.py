from code_reviewer.constants import (
    ERRORS_PROMPT,
    IMPROVEMENTS_PROMPT,
    REFACTOR_PROMPT,
    REVIEW_PROMPT,
)
from code_reviewer.models import ReviewType

PROMPTS = {
    ReviewType.REVIEW: REVIEW_PROMPT,
    ReviewType.ERRORS: ERRORS_PROMPT,
    ReviewType.IMPROVEMENTS: IMPROVEMENTS_PROMPT,
    ReviewType.REFACTOR: REFACTOR_PROMPT,
}


def build_prompt(code: str, review_type) -> str:
    """
    Fill the template for `review_type` with the source code.

    Unknown review types use the general review template.
    """
    template = PROMPTS[ReviewType.resolve(review_type)]
    return template.format(code=code)
