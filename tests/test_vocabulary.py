"""
Tests for the keyword vocabularies.
"""

from dataclasses import FrozenInstanceError

import pytest

from linkup_matching.matching.vocabulary import DEFAULT_VOCABULARY, REGIONS, Vocabulary


DOMAINS_BY_NAME = {domain.name: domain for domain in DEFAULT_VOCABULARY.domains}


class TestVocabulary:

    def test_domains(self):
        assert list(DOMAINS_BY_NAME) == ["medical", "tech", "legal", "education"]
        assert DOMAINS_BY_NAME["medical"].matches("médecin urgentiste")

    def test_tech_does_not_reject_clinical_words(self):
        tech = DOMAINS_BY_NAME["tech"]
        assert not tech.conflicts_with("patient et rigoureux")
        assert tech.conflicts_with("infirmière de bloc")

    @pytest.mark.parametrize("level,rank", [
        ("débutant", 1),
        (" Senior ", 4),
        ("MANAGER", 7),
        ("unknown", 3),
    ])
    def test_experience_rank(self, level, rank):
        assert DEFAULT_VOCABULARY.experience_rank(level) == rank

    def test_expected_salary(self):
        assert DEFAULT_VOCABULARY.expected_salary("lead") == 90000
        assert DEFAULT_VOCABULARY.expected_salary("stagiaire") == 45000

    def test_regions(self):
        france, europe = REGIONS
        assert france.covers("toulouse") and france.includes("france")
        assert not france.includes("")
        assert europe.covers("madrid, espagne") and europe.includes("union europeenne")

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_VOCABULARY.experience_levels["stagiaire"] = 0
        with pytest.raises(FrozenInstanceError):
            DEFAULT_VOCABULARY.default_salary = 1

    def test_custom_tables(self):
        vocabulary = Vocabulary(experience_levels={"stagiaire": 1}, default_experience_rank=1)
        assert vocabulary.experience_rank("Stagiaire") == 1
        assert vocabulary.experience_rank("senior") == 1
