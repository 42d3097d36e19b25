"""
Course Catalog

Immutable Course / LearningJourney / CoursePackage records with lookup and
filter accessors. Unknown ids return None rather than raising; callers handle
absence explicitly.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

LEVELS = ("beginner", "intermediate", "advanced")
FORMATS = ("online", "in-person", "hybrid")

_LEADING_INT = re.compile(r"\s*(\d+)")


class CatalogError(ValueError):
    """Raised when catalog records reference courses that do not exist."""


@dataclass(frozen=True)
class CoursePricing:
    amount: float
    currency: str = "EUR"
    installments: bool = False


@dataclass(frozen=True)
class Course:
    """A single bookable course."""
    id: str
    name: str
    name_german: str
    description: str
    level: str
    duration: str  # free text, leading integer = weeks ("3 weeks")
    format: str
    category: str
    pricing: CoursePricing
    skills: Tuple[str, ...] = ()
    prerequisites: Tuple[str, ...] = ()
    outcomes: Tuple[str, ...] = ()
    perfect_for: Tuple[str, ...] = ()

    @property
    def duration_weeks(self) -> Optional[int]:
        """Leading integer of the duration text, or None if there is none."""
        match = _LEADING_INT.match(self.duration)
        return int(match.group(1)) if match else None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Course":
        pricing = data["pricing"]
        return cls(
            id=data["id"],
            name=data["name"],
            name_german=data.get("name_german", data["name"]),
            description=data.get("description", ""),
            level=data["level"],
            duration=data["duration"],
            format=data["format"],
            category=data["category"],
            pricing=CoursePricing(
                amount=pricing["amount"],
                currency=pricing.get("currency", "EUR"),
                installments=pricing.get("installments", False),
            ),
            skills=tuple(data.get("skills", [])),
            prerequisites=tuple(data.get("prerequisites", [])),
            outcomes=tuple(data.get("outcomes", [])),
            perfect_for=tuple(data.get("perfect_for", [])),
        )


@dataclass(frozen=True)
class JourneyPhase:
    phase: int  # 1-based
    name: str
    duration: str
    courses: Tuple[str, ...]
    description: str


@dataclass(frozen=True)
class LearningJourney:
    """Multi-phase curriculum grouping several courses toward one outcome."""
    id: str
    name: str
    description: str
    target_audience: str
    duration: str
    outcome: str
    phases: Tuple[JourneyPhase, ...] = ()
    courses: Tuple[str, ...] = ()

    def referenced_course_ids(self) -> List[str]:
        """Flat course list followed by any phase-only ids, without duplicates."""
        seen: List[str] = []
        for course_id in self.courses:
            if course_id not in seen:
                seen.append(course_id)
        for phase in self.phases:
            for course_id in phase.courses:
                if course_id not in seen:
                    seen.append(course_id)
        return seen

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LearningJourney":
        phases = tuple(
            JourneyPhase(
                phase=p["phase"],
                name=p["name"],
                duration=p["duration"],
                courses=tuple(p.get("courses", [])),
                description=p.get("description", ""),
            )
            for p in data.get("phases", [])
        )
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description", ""),
            target_audience=data.get("target_audience", ""),
            duration=data.get("duration", ""),
            outcome=data.get("outcome", ""),
            phases=phases,
            courses=tuple(data.get("courses", [])),
        )


@dataclass(frozen=True)
class PackagePricing:
    amount: float
    discount: float  # percent
    currency: str = "EUR"


@dataclass(frozen=True)
class CoursePackage:
    id: str
    name: str
    name_german: str
    description: str
    level: str
    duration: str
    courses: Tuple[str, ...]
    pricing: PackagePricing
    target_audience: Tuple[str, ...] = ()
    outcomes: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CoursePackage":
        pricing = data["pricing"]
        return cls(
            id=data["id"],
            name=data["name"],
            name_german=data.get("name_german", data["name"]),
            description=data.get("description", ""),
            level=data["level"],
            duration=data.get("duration", ""),
            courses=tuple(data.get("courses", [])),
            pricing=PackagePricing(
                amount=pricing["amount"],
                discount=pricing.get("discount", 0),
                currency=pricing.get("currency", "EUR"),
            ),
            target_audience=tuple(data.get("target_audience", [])),
            outcomes=tuple(data.get("outcomes", [])),
        )


@dataclass(frozen=True)
class PackageValue:
    """Price of a package compared to booking its courses individually."""
    original: float
    discounted: float
    savings: float

    @property
    def discount_percent(self) -> float:
        if not self.original:
            return 0.0
        return (1 - self.discounted / self.original) * 100


@dataclass
class Catalog:
    """
    Read-only view over the course catalog.

    All accessors are pure. Lookups by id return None for unknown ids.
    """
    courses: List[Course] = field(default_factory=list)
    journeys: List[LearningJourney] = field(default_factory=list)
    packages: List[CoursePackage] = field(default_factory=list)

    def __post_init__(self):
        self._courses_by_id: Dict[str, Course] = {c.id: c for c in self.courses}
        self._journeys_by_id: Dict[str, LearningJourney] = {j.id: j for j in self.journeys}
        self._packages_by_id: Dict[str, CoursePackage] = {p.id: p for p in self.packages}

    @classmethod
    def from_records(
        cls,
        courses: Iterable[Dict[str, Any]],
        journeys: Iterable[Dict[str, Any]],
        packages: Iterable[Dict[str, Any]],
        strict: bool = True,
    ) -> "Catalog":
        """
        Build a catalog from plain dictionaries.

        Args:
            courses: Course records
            journeys: Learning journey records
            packages: Course package records
            strict: Raise CatalogError if any referenced course id is missing

        Returns:
            Catalog instance
        """
        catalog = cls(
            courses=[Course.from_dict(c) for c in courses],
            journeys=[LearningJourney.from_dict(j) for j in journeys],
            packages=[CoursePackage.from_dict(p) for p in packages],
        )
        if strict:
            problems = catalog.validate()
            if problems:
                raise CatalogError("; ".join(problems))
        return catalog

    # Courses

    def get_course(self, course_id: str) -> Optional[Course]:
        return self._courses_by_id.get(course_id)

    def courses_by_level(self, level: str) -> List[Course]:
        return [c for c in self.courses if c.level == level]

    def courses_by_category(self, category: str) -> List[Course]:
        return [c for c in self.courses if c.category == category]

    def find_mentioned_courses(self, text: str) -> List[Course]:
        """
        Courses whose id or English/German name appears in the text,
        ordered by where they are first mentioned.
        """
        text_lower = text.lower()
        hits = []
        for course in self.courses:
            positions = [
                text_lower.find(needle.lower())
                for needle in (course.id, course.name, course.name_german)
            ]
            positions = [p for p in positions if p >= 0]
            if positions:
                hits.append((min(positions), course))
        hits.sort(key=lambda hit: hit[0])
        return [course for _, course in hits]

    # Journeys

    def get_journey(self, journey_id: str) -> Optional[LearningJourney]:
        return self._journeys_by_id.get(journey_id)

    def journeys_containing(self, course_id: str) -> List[LearningJourney]:
        return [j for j in self.journeys if course_id in j.referenced_course_ids()]

    def journey_courses(self, journey: LearningJourney) -> List[Course]:
        """Resolve a journey's flat course list, silently dropping unknown ids."""
        resolved = (self.get_course(course_id) for course_id in journey.courses)
        return [course for course in resolved if course is not None]

    # Packages

    def get_package(self, package_id: str) -> Optional[CoursePackage]:
        return self._packages_by_id.get(package_id)

    def packages_by_level(self, level: str) -> List[CoursePackage]:
        return [p for p in self.packages if p.level == level]

    def package_value(self, package_id: str) -> Optional[PackageValue]:
        """Original (sum of member prices) vs. discounted package price."""
        package = self.get_package(package_id)
        if package is None:
            return None

        original = 0
        for course_id in package.courses:
            course = self.get_course(course_id)
            original += course.pricing.amount if course else 0

        return PackageValue(
            original=original,
            discounted=package.pricing.amount,
            savings=original - package.pricing.amount,
        )

    def validate(self) -> List[str]:
        """List every dangling course reference (empty when consistent)."""
        problems = []
        for journey in self.journeys:
            for course_id in journey.referenced_course_ids():
                if course_id not in self._courses_by_id:
                    problems.append(f"journey '{journey.id}' references unknown course '{course_id}'")
        for package in self.packages:
            for course_id in package.courses:
                if course_id not in self._courses_by_id:
                    problems.append(f"package '{package.id}' references unknown course '{course_id}'")
        return problems


_default_catalog: Optional[Catalog] = None


def default_catalog() -> Catalog:
    """Get or create the catalog built from the bundled ELLU Studios data."""
    global _default_catalog

    if _default_catalog is None:
        from ellu_course_advisor.catalog_data import COURSES, LEARNING_JOURNEYS, COURSE_PACKAGES
        _default_catalog = Catalog.from_records(COURSES, LEARNING_JOURNEYS, COURSE_PACKAGES)

    return _default_catalog
