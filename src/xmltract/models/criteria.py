"""
Match criteria for element selection.

MatchCriteria is immutable once constructed. When case-insensitive matching
is requested, the folded copies of name and prefix are computed once here,
so per-element matching only ever folds the candidate side.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator


def fold_case(value: Optional[str]) -> Optional[str]:
    """Return a case-folded copy of value (None passes through)."""
    if value is None:
        return None
    return value.casefold()


class MatchCriteria(BaseModel):
    """
    Target element selection: local name, optional prefix, case mode.

    Attributes:
        name: Target element local name (no namespace prefix)
        prefix: Namespace prefix to require in addition to name.
                None means the prefix is ignored entirely.
        case_insensitive: Compare name (and prefix) ignoring case

    Example:
        >>> criteria = MatchCriteria(name='title', prefix='dc')
        >>> criteria.folded_name
        'title'
        >>> MatchCriteria.from_qname('dc:Title', case_insensitive=True).folded_name
        'title'
    """

    name: str = Field(
        ...,
        min_length=1,
        description="Target element local name",
        examples=["title"]
    )

    prefix: Optional[str] = Field(
        default=None,
        description="Namespace prefix that must match as well (None: ignore prefix)",
        examples=["dc"]
    )

    case_insensitive: bool = Field(
        default=False,
        description="Match name and prefix ignoring case"
    )

    _folded_name: str = PrivateAttr()
    _folded_prefix: Optional[str] = PrivateAttr(default=None)

    model_config = ConfigDict(frozen=True)

    @field_validator('name')
    @classmethod
    def validate_local_name(cls, v: str) -> str:
        """A local name cannot carry a prefix separator or whitespace."""
        if ':' in v:
            raise ValueError(
                f"Element name must be a local name without prefix, got '{v}'. "
                f"Use the prefix field (or MatchCriteria.from_qname) instead."
            )
        if any(c.isspace() for c in v):
            raise ValueError(f"Element name cannot contain whitespace, got '{v}'")
        return v

    @field_validator('prefix')
    @classmethod
    def validate_prefix(cls, v: Optional[str]) -> Optional[str]:
        """A present prefix must be a non-empty token."""
        if v is None:
            return v
        if not v or ':' in v or any(c.isspace() for c in v):
            raise ValueError(f"Invalid namespace prefix: '{v}'")
        return v

    def model_post_init(self, __context) -> None:
        if self.case_insensitive:
            self._folded_name = fold_case(self.name)
            self._folded_prefix = fold_case(self.prefix)
        else:
            self._folded_name = self.name
            self._folded_prefix = self.prefix

    @property
    def folded_name(self) -> str:
        """Name as compared against candidates (folded if case-insensitive)."""
        return self._folded_name

    @property
    def folded_prefix(self) -> Optional[str]:
        """Prefix as compared against candidates (folded if case-insensitive)."""
        return self._folded_prefix

    @classmethod
    def from_qname(cls, qname: str, case_insensitive: bool = False) -> 'MatchCriteria':
        """
        Build criteria from a qualified name like 'dc:title'.

        A name without a colon leaves the prefix unset (prefix ignored).
        """
        prefix, sep, name = qname.rpartition(':')
        return cls(
            name=name,
            prefix=prefix if sep else None,
            case_insensitive=case_insensitive
        )
