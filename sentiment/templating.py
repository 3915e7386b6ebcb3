"""
URL Templater - Single-placeholder URL templates for hooks.

A hook URL carries exactly one ``{id}`` placeholder. The template is
validated once when the hook is loaded; rendering inserts the record id
verbatim (no URL escaping, callers supply fetch-safe ids).
"""

from dataclasses import dataclass, field

from .exceptions import TemplateError


PLACEHOLDER = "{id}"


@dataclass(frozen=True)
class UrlTemplate:
    """A URL split around its single record id placeholder."""
    template: str
    _prefix: str = field(init=False, repr=False, compare=False)
    _suffix: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        count = self.template.count(PLACEHOLDER)
        if count != 1:
            raise TemplateError(
                f"URL template must contain exactly one {PLACEHOLDER} placeholder, found {count}",
                template=self.template,
            )
        prefix, suffix = self.template.split(PLACEHOLDER)
        object.__setattr__(self, "_prefix", prefix)
        object.__setattr__(self, "_suffix", suffix)

    def render(self, record_id: str) -> str:
        return f"{self._prefix}{record_id}{self._suffix}"

    def __str__(self) -> str:
        return self.template


def render(template: str, record_id: str) -> str:
    """Validate ``template`` and substitute ``record_id`` into it."""
    return UrlTemplate(template).render(record_id)
