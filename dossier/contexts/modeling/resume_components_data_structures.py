"""
Resume Component Data Structures

Defines value objects nested inside a resume: links, periods, organizations,
and the two section variants.

Sections form a tagged union:

    Section = TextSection | OrganizationSection

Which variant a given SectionType accepts is looked up in defaults.SECTION_VARIANTS.
All components are frozen and compare structurally.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple, Union

from dossier.contexts.modeling.exceptions import PeriodError


@dataclass(frozen=True)
class Link:
    """
    Named hyperlink (organization homepage, profile, etc.).

    Attributes:
        name: Display name
        url: Target URL, None when the organization has no site
    """

    name: str
    url: Optional[str] = None


@dataclass(frozen=True)
class Period:
    """
    Time interval spent in one role at an organization.

    An absent end (end_year and end_month both None) means the period is ongoing.

    Attributes:
        start_year: Year the period began
        start_month: Month the period began (1-12)
        end_year: Year the period ended, None if ongoing
        end_month: Month the period ended (1-12), None if ongoing
        title: Position or degree title
        description: Free text
    """

    start_year: int
    start_month: int
    end_year: Optional[int] = None
    end_month: Optional[int] = None
    title: str = ""
    description: str = ""

    def __post_init__(self):
        if not 1 <= self.start_month <= 12:
            raise PeriodError(f"Start month must be 1-12, got {self.start_month}")
        if (self.end_year is None) != (self.end_month is None):
            raise PeriodError("End year and end month must both be given or both omitted")
        if self.end_month is not None:
            if not 1 <= self.end_month <= 12:
                raise PeriodError(f"End month must be 1-12, got {self.end_month}")
            if (self.end_year, self.end_month) < (self.start_year, self.start_month):
                raise PeriodError(
                    f"Period ends ({self.end_year}-{self.end_month:02d}) before it starts "
                    f"({self.start_year}-{self.start_month:02d})"
                )

    @property
    def is_ongoing(self) -> bool:
        return self.end_year is None

    @property
    def start(self) -> date:
        return date(self.start_year, self.start_month, 1)

    @property
    def end(self) -> Optional[date]:
        if self.is_ongoing:
            return None
        return date(self.end_year, self.end_month, 1)


@dataclass(frozen=True)
class Organization:
    """
    Employer or institution entry: a link plus the periods spent there.

    Attributes:
        link: Organization name and URL
        periods: Ordered periods (positions, degrees)
    """

    link: Link
    periods: Tuple[Period, ...] = ()

    def __post_init__(self):
        # Accept any iterable of periods but always store a tuple
        object.__setattr__(self, "periods", tuple(self.periods))

    @classmethod
    def create(cls, name: str, url: Optional[str] = None, *periods: Period) -> "Organization":
        """Build an organization from a name, optional URL and periods."""
        return cls(link=Link(name, url), periods=periods)

    def with_period(self, period: Period) -> "Organization":
        """Return a copy of this organization with one more period appended."""
        return Organization(link=self.link, periods=self.periods + (period,))


@dataclass(frozen=True)
class TextSection:
    """Section holding an ordered sequence of statements."""

    items: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def of(cls, *items: str) -> "TextSection":
        return cls(items=items)


@dataclass(frozen=True)
class OrganizationSection:
    """Section holding an ordered sequence of organizations."""

    items: Tuple[Organization, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def of(cls, *items: Organization) -> "OrganizationSection":
        return cls(items=items)


Section = Union[TextSection, OrganizationSection]
