"""
Placeholder values collected for a template run.

Attributes are snake_case in Python and serialize as camelCase
(``projectName``, ``repoOwner``, ...) in the state record.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Order matters: prompts and summaries follow it
VALUE_KEYS = (
    "project_name",
    "description",
    "author",
    "author_email",
    "repo_owner",
    "repo_name",
    "repo_url",
    "company_domain",
    "support_email",
    "security_email",
)


class PlaceholderValues(BaseModel):
    """The ten values substituted into a template. Empty string means unknown."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    project_name: str = ""
    description: str = ""
    author: str = ""
    author_email: str = ""
    repo_owner: str = ""
    repo_name: str = ""
    repo_url: str = ""
    company_domain: str = ""
    support_email: str = ""
    security_email: str = ""

    def with_repo_url(self, host: str = "github.com") -> PlaceholderValues:
        """Derive repo_url from owner and name when both are known."""
        if self.repo_owner and self.repo_name:
            url = f"https://{host}/{self.repo_owner}/{self.repo_name}"
            return self.model_copy(update={"repo_url": url})
        return self

    def as_dict(self) -> dict[str, str]:
        """camelCase mapping, as written to the state record."""
        return self.model_dump(by_alias=True)
