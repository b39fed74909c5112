import logging

import pytest

from jobboard.services.catalogue import SkillCatalogue
from jobboard.services.entries import SkillEntry
from jobboard.services.normalizer import SkillNormalizer, normalize_skill, normalize_skills


@pytest.fixture
def empty_catalogue():
    return SkillCatalogue(static_entries=[])


def test_englisch_scenario(catalogue):
    assert normalize_skills(["Englisch", "englisch", "English"], catalogue) == ["English"]


def test_canonical_name_beats_alias():
    entries = [
        SkillEntry("Project Management", aliases=("scrum", "agile")),
        SkillEntry("Scrum"),
    ]
    assert normalize_skill("scrum", SkillCatalogue(static_entries=entries)) == "Scrum"
    assert normalize_skill("SCRUM", SkillCatalogue(static_entries=list(reversed(entries)))) == "Scrum"
    assert normalize_skill("agile", SkillCatalogue(static_entries=entries)) == "Project Management"


def test_catalogue_alias(catalogue):
    assert normalize_skill("reactjs", catalogue) == "React"
    assert normalize_skill("  Node JS ", catalogue) == "Node.js"


def test_fallback_table(empty_catalogue):
    assert normalize_skill("js", empty_catalogue) == "JavaScript"
    assert normalize_skill("ML", empty_catalogue) == "Machine Learning"
    assert normalize_skill("node js", empty_catalogue) == "Node.js"


def test_seed_list_is_last_resort(empty_catalogue):
    assert normalize_skill("Rails", empty_catalogue) == "Ruby on Rails"
    assert normalize_skill("scala", empty_catalogue) == "Scala"


def test_unknown_skill_passes_through_trimmed(catalogue):
    assert normalize_skill("  Underwater Basket Weaving ", catalogue) == "Underwater Basket Weaving"


def test_unicode_dashes_fold_to_hyphen(catalogue):
    assert normalize_skill("c\u2011sharp", catalogue) == "C#"


@pytest.mark.parametrize("token", ["", "   ", None])
def test_empty_token(catalogue, token):
    assert normalize_skill(token, catalogue) == ""


def test_batch_drops_empties_and_duplicates_keeping_order(catalogue):
    tokens = ["react", "", "Python", "  ", "REACT", "js", "JavaScript", "Cobol", "cobol"]
    assert normalize_skills(tokens, catalogue) == ["React", "Python", "JavaScript", "Cobol"]


@pytest.mark.parametrize("tokens", [[], None, ["docker"]])
def test_batch_sizes(catalogue, tokens):
    assert normalize_skills(tokens, catalogue) == (["Docker"] if tokens else [])


@pytest.mark.parametrize("tokens", [
    ["js", "ts", "Englisch", "k8s", "postgres"],
    ["ML", "Rails", "scala", "Obscure Thing", "obscure thing"],
    ["gcp", "google cloud", "Vue", "vue.js", "c#", "C Sharp"],
])
def test_idempotent(catalogue, tokens):
    once = normalize_skills(tokens, catalogue)
    assert normalize_skills(once, catalogue) == once
    assert "" not in once
    assert len({s.casefold() for s in once}) == len(once)


def test_store_down_degrades_to_static_tables(broken_store, caplog):
    cat = SkillCatalogue(store=broken_store)
    with caplog.at_level(logging.WARNING):
        result = SkillNormalizer(cat).normalize_skills(["englisch", "js", "Kubernetes", "Brand New Skill"])
    assert result == ["English", "JavaScript", "Kubernetes", "Brand New Skill"]
    assert "all_entries" in broken_store.calls
    assert "skill store" in caplog.text


def test_store_only_skill(db_catalogue):
    # seeded from SEED_SKILLS, absent from the static vocabulary
    assert normalize_skill("oracledb", db_catalogue) == "Oracle"


def test_skill_added_by_another_process_is_found(db_catalogue, store):
    db_catalogue.entries()
    store.add("Terraform Cloud", "DevOps", ["tfc"])
    assert normalize_skill("TFC", db_catalogue) == "Terraform Cloud"


def test_default_catalogue_used_when_none_given():
    assert normalize_skills(["js", "englisch"]) == ["JavaScript", "English"]
