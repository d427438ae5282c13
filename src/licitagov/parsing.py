"""Splitting of model replies into reasoning and visible answer.

The chat system instruction asks the model to open every reply with a
``|||THOUGHT|||`` block and to start the user-facing answer after
``|||RESPONSE|||``. The pair is a purely textual convention, so a single
regular expression is all the parsing there is.
"""

import re

from pydantic import BaseModel, ConfigDict

THOUGHT_DELIMITER = "|||THOUGHT|||"
RESPONSE_DELIMITER = "|||RESPONSE|||"

_THOUGHT_PATTERN = re.compile(
    re.escape(THOUGHT_DELIMITER) + r"(?P<thought>.*?)" + re.escape(RESPONSE_DELIMITER) + r"(?P<response>.*)",
    re.DOTALL,
)


class ThoughtResponse(BaseModel):
    """A model reply split into its reasoning block and visible answer.

    ``thought`` is None when the reply carried no well-formed delimiter pair;
    an empty string means the block was present but empty.
    """

    model_config = ConfigDict(frozen=True)

    thought: str | None = None
    response: str

    @property
    def has_thought(self) -> bool:
        return self.thought is not None


def split_thought(text: str) -> ThoughtResponse:
    """Split ``text`` on the THOUGHT/RESPONSE delimiter pair.

    Anything before the THOUGHT marker is dropped. A lone marker, or markers
    in the wrong order, leaves the text untouched.
    """
    match = _THOUGHT_PATTERN.search(text)
    if match is None:
        return ThoughtResponse(thought=None, response=text)
    return ThoughtResponse(
        thought=match.group("thought").strip(),
        response=match.group("response").strip(),
    )
