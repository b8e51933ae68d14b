"""Keyword vocabularies and lookup tables used by the matching engine"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple


@dataclass(frozen=True)
class DomainDefinition:
    """A professional domain and the domains it must never be paired with"""
    name: str
    keywords: Tuple[str, ...]
    incompatible_with: Tuple[str, ...]

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)

    def conflicts_with(self, text: str) -> bool:
        return any(keyword in text for keyword in self.incompatible_with)


@dataclass(frozen=True)
class RegionTier:
    """Geographic fallback used when city and country do not match directly.

    A job located in one of ``places`` earns ``score`` for candidates whose
    country mentions one of ``member_markers``.
    """
    name: str
    places: Tuple[str, ...]
    score: int
    member_markers: Tuple[str, ...]

    def covers(self, job_location: str) -> bool:
        return any(place in job_location for place in self.places)

    def includes(self, candidate_country: str) -> bool:
        return bool(candidate_country) and any(
            marker in candidate_country for marker in self.member_markers
        )


MEDICAL_TERMS = (
    "médecin", "docteur", "médecine", "medical", "healthcare", "hospital",
    "clinique", "patient", "diagnostic", "traitement", "pharmacie",
    "pharmaceutique", "chirurgie", "infirmier", "infirmière",
)

TECH_TERMS = (
    "développeur", "developer", "programming", "coding", "software", "web",
    "application", "it", "technologie", "ingénieur logiciel",
)

DOMAINS: Tuple[DomainDefinition, ...] = (
    DomainDefinition(
        name="medical",
        keywords=MEDICAL_TERMS,
        incompatible_with=(
            "tech", "informatique", "développement", "programming", "developer",
            "coding", "software", "web", "application", "it", "technologie",
            "ingénieur logiciel",
        ),
    ),
    DomainDefinition(
        name="tech",
        keywords=TECH_TERMS + ("javascript", "python", "java", "react", "node"),
        incompatible_with=tuple(t for t in MEDICAL_TERMS if t not in (
            "clinique", "patient", "diagnostic", "traitement",
        )),
    ),
    DomainDefinition(
        name="legal",
        keywords=(
            "avocat", "juriste", "droit", "legal", "lawyer", "attorney",
            "justice", "tribunal", "juridique",
        ),
        incompatible_with=(
            "médecin", "docteur", "médecine", "medical", "healthcare",
            "développeur", "developer", "programming", "coding",
        ),
    ),
    DomainDefinition(
        name="education",
        keywords=(
            "professeur", "enseignant", "teacher", "education", "enseignement",
            "école", "université", "académique",
        ),
        incompatible_with=(
            "développeur", "developer", "programming", "coding", "médecin",
            "docteur", "médecine",
        ),
    ),
)

RELEVANT_SKILLS: Tuple[str, ...] = (
    # engineering
    "javascript", "react", "node.js", "python", "java", "php", "sql", "mongodb",
    "html", "css", "typescript", "vue.js", "angular", "express", "django",
    "git", "docker", "kubernetes", "aws", "azure", "gcp", "linux", "windows",
    # design
    "figma", "photoshop", "illustrator", "sketch", "adobe", "design",
    # marketing and sales
    "marketing", "seo", "sem", "analytics", "google analytics", "facebook",
    "salesforce", "hubspot", "mailchimp", "wordpress", "shopify",
    # project and office tooling
    "project management", "agile", "scrum", "kanban", "jira", "trello",
    "excel", "powerpoint", "word", "office", "google suite",
    # soft skills
    "communication", "leadership", "teamwork", "problem solving",
    # data
    "data analysis", "statistics", "machine learning", "ai", "blockchain",
    # health
    "medical", "healthcare", "clinical", "pharmaceutical", "diagnostic",
    # legal
    "legal", "law", "juridique", "droit", "contract",
    # finance
    "finance", "accounting", "banking", "investment", "trading",
)

TITLE_STOPWORDS: FrozenSet[str] = frozenset({
    "de", "le", "la", "les", "un", "une", "du", "des", "et", "ou", "pour",
    "avec", "sur", "dans",
})

SEMANTIC_GROUPS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "développement": (
        "développeur", "dev", "programmer", "developer", "ingénieur logiciel",
        "engineer", "software", "coding", "programmation",
    ),
    "design": ("designer", "design", "ux", "ui", "graphiste", "graphic", "creative"),
    "marketing": (
        "marketing", "marketeur", "communication", "brand", "publicité", "advertising",
    ),
    "vente": ("commercial", "sales", "business", "account", "business development"),
    "management": ("manager", "lead", "chef", "directeur", "head", "director"),
    "medical": (
        "médecin", "docteur", "medical", "healthcare", "clinique", "hospital", "médecine",
    ),
    "legal": ("avocat", "juriste", "legal", "lawyer", "droit", "juridique"),
    "finance": ("finance", "comptable", "accounting", "banking", "investment", "trading"),
    "education": ("professeur", "enseignant", "teacher", "education", "enseignement"),
})

_SOFTWARE_INDUSTRY = (
    "javascript", "python", "java", "react", "node.js", "programming",
    "development", "développeur", "developer", "software", "web",
    "application", "coding",
)
_HEALTH_INDUSTRY = (
    "medical", "health", "pharmaceutical", "clinical", "research", "médecin",
    "docteur", "médecine", "healthcare", "hospital", "clinique",
)
_EDUCATION_INDUSTRY = (
    "teaching", "education", "training", "learning", "academic", "professeur",
    "enseignant", "enseignement",
)
_LEGAL_INDUSTRY = (
    "legal", "law", "juridique", "droit", "avocat", "juriste", "lawyer", "contract",
)

# Insertion order is the lookup order.
INDUSTRY_KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "tech": _SOFTWARE_INDUSTRY,
    "informatique": _SOFTWARE_INDUSTRY + ("it", "technologie"),
    "design": (
        "figma", "photoshop", "illustrator", "design", "ux", "ui", "graphic",
        "graphiste", "creative",
    ),
    "marketing": (
        "marketing", "seo", "analytics", "social media", "advertising", "brand",
        "communication", "publicité",
    ),
    "finance": (
        "finance", "accounting", "banking", "investment", "trading", "comptable",
        "financier",
    ),
    "healthcare": _HEALTH_INDUSTRY,
    "medical": _HEALTH_INDUSTRY,
    "éducation": _EDUCATION_INDUSTRY,
    "education": _EDUCATION_INDUSTRY,
    "legal": _LEGAL_INDUSTRY,
    "juridique": _LEGAL_INDUSTRY,
})

REMOTE_MARKERS: Tuple[str, ...] = ("remote", "télétravail", "hybride")

EUROPEAN_COUNTRIES = ("france", "allemagne", "espagne", "italie", "belgique", "suisse")

REGIONS: Tuple[RegionTier, ...] = (
    RegionTier(
        name="france",
        places=("paris", "lyon", "marseille", "toulouse", "nantes", "lille", "strasbourg"),
        score=60,
        member_markers=("france",),
    ),
    RegionTier(
        name="europe",
        places=EUROPEAN_COUNTRIES,
        score=40,
        member_markers=("europe",),
    ),
)

EXPERIENCE_LEVELS: Mapping[str, int] = MappingProxyType({
    "débutant": 1,
    "junior": 2,
    "intermédiaire": 3,
    "senior": 4,
    "expert": 5,
    "lead": 6,
    "manager": 7,
})

# Expected yearly gross salary (EUR) per experience level
AVERAGE_SALARIES: Mapping[str, int] = MappingProxyType({
    "débutant": 30000,
    "junior": 35000,
    "intermédiaire": 45000,
    "senior": 60000,
    "expert": 80000,
    "lead": 90000,
    "manager": 100000,
})

CONTRACT_SCORES: Tuple[Tuple[str, int], ...] = (
    ("cdi", 80),
    ("cdd", 70),
    ("stage", 60),
    ("freelance", 50),
)


@dataclass(frozen=True)
class Vocabulary:
    """Every table the guard and the factor scorers read from"""
    domains: Tuple[DomainDefinition, ...] = DOMAINS
    relevant_skills: Tuple[str, ...] = RELEVANT_SKILLS
    title_stopwords: FrozenSet[str] = TITLE_STOPWORDS
    semantic_groups: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: SEMANTIC_GROUPS)
    industry_keywords: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: INDUSTRY_KEYWORDS)
    remote_markers: Tuple[str, ...] = REMOTE_MARKERS
    regions: Tuple[RegionTier, ...] = REGIONS
    experience_levels: Mapping[str, int] = field(default_factory=lambda: EXPERIENCE_LEVELS)
    default_experience_rank: int = 3
    # indexed by level gap; anything further scores experience_far_score
    experience_gap_scores: Tuple[int, ...] = (100, 80, 60, 40)
    experience_far_score: int = 10
    average_salaries: Mapping[str, int] = field(default_factory=lambda: AVERAGE_SALARIES)
    default_salary: int = 45000
    # (max percent gap, score), ascending
    salary_bands: Tuple[Tuple[int, int], ...] = ((10, 100), (20, 80), (30, 60), (50, 40))
    salary_far_score: int = 10
    contract_scores: Tuple[Tuple[str, int], ...] = CONTRACT_SCORES
    available_contract_score: int = 90

    def experience_rank(self, level: str) -> int:
        return self.experience_levels.get(level.strip().lower(), self.default_experience_rank)

    def expected_salary(self, level: str) -> int:
        return self.average_salaries.get(level.strip().lower(), self.default_salary)


DEFAULT_VOCABULARY = Vocabulary()
