"""
Client side of the review flow.

`ReviewSession` holds the same ephemeral state the browser form keeps (code
text, selected review, last result, in-flight flag) and sends at most one
analysis request at a time to the `/analyze-code` endpoint.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import httpx
from pydantic import BaseModel

from code_reviewer.constants import ACCEPTED_EXTENSIONS
from code_reviewer.models import AnalysisRequest, ReviewType

ANALYZE_PATH = "/analyze-code"


class UnsupportedFileError(ValueError):
    pass


class Notice(BaseModel):
    title: str
    description: str
    variant: str = "default"


def load_source_file(path: Union[str, Path]) -> str:
    """
    Read a plaintext source file for review.

    Args:
        path: Location of the file. Its extension must be one of ACCEPTED_EXTENSIONS.

    Returns:
        The file contents.
    """
    path = Path(path)
    if path.suffix.lower() not in ACCEPTED_EXTENSIONS:
        raise UnsupportedFileError(
            f"Unsupported file type '{path.suffix}'. Accepted: {', '.join(ACCEPTED_EXTENSIONS)}"
        )
    return path.read_text(encoding="utf-8", errors="replace")


class ReviewSession:
    """Local state for one user's review form."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._http_client = http_client or httpx.AsyncClient(base_url=base_url)
        self.code = ""
        self.active_review: Optional[ReviewType] = None
        self.result = ""
        self.is_analyzing = False
        self.notices: List[Notice] = []

    @property
    def actions_enabled(self) -> bool:
        return bool(self.code.strip()) and not self.is_analyzing

    def load_file(self, path: Union[str, Path]) -> None:
        self.code = load_source_file(path)

    def _notify(self, title: str, description: str, variant: str = "default") -> None:
        self.notices.append(Notice(title=title, description=description, variant=variant))

    async def request_review(self, review_type: ReviewType) -> Optional[str]:
        """
        Ask the endpoint for an analysis of the current code.

        Returns the analysis text, or None when the action was rejected locally
        or the request failed. Failures are reported through `notices`.
        """
        if self.is_analyzing:
            return None

        if not self.code.strip():
            self._notify(
                "No code provided",
                "Please paste your code before starting analysis.",
                "destructive",
            )
            return None

        review_type = ReviewType(review_type)
        body = AnalysisRequest(code=self.code.strip(), reviewType=review_type)

        self.is_analyzing = True
        self.active_review = review_type
        self.result = ""

        try:
            response = await self._http_client.post(ANALYZE_PATH, json=body.model_dump(mode="json"))
            response.raise_for_status()
            data = response.json()
            analysis = data.get("analysis") if isinstance(data, dict) else None
            if not analysis:
                raise ValueError("No analysis returned")
        except (httpx.HTTPError, ValueError) as e:
            logging.error(f"Error analyzing code: {e}")
            self._notify(
                "Analysis failed",
                "Failed to analyze your code. Please try again.",
                "destructive",
            )
            return None
        finally:
            self.is_analyzing = False

        self.result = analysis
        self._notify("Analysis complete", f"Your code {review_type.value} analysis is ready.")
        return analysis

    async def aclose(self) -> None:
        await self._http_client.aclose()
