import pytest

from jobboard.services.catalogue import SkillCatalogue
from jobboard.services.entries import SkillEntry
from jobboard.services.extractor import SkillExtractor, alias_pattern, extract_skills
from jobboard.services.vocabulary import EXTRACTION_VOCABULARY


def test_react_and_node_scenario(catalogue):
    found = extract_skills("I have 5 years of React.js and Node js experience", catalogue)
    assert "React" in found
    assert "Node.js" in found


def test_reactor_is_not_react(catalogue):
    assert "React" not in extract_skills("Maintained the cooling system of a reactor", catalogue)


def test_output_sorted_and_deterministic(catalogue):
    text = "Python, Docker, AWS, Englisch, Kubernetes (k8s), PostgreSQL and Excel"
    first = extract_skills(text, catalogue)
    assert first == sorted(first, key=lambda n: (n.casefold(), n))
    assert extract_skills(text, catalogue) == first
    assert SkillExtractor(SkillCatalogue()).extract(text) == first


@pytest.mark.parametrize("entry", EXTRACTION_VOCABULARY, ids=lambda e: e.name)
def test_every_alias_finds_its_skill(catalogue, entry):
    for alias in entry.aliases:
        assert entry.name in extract_skills(f"Skills: {alias}, and more", catalogue), alias


@pytest.mark.parametrize("text", ["node-js", "Node_JS", "node/js", "NODE.JS", "nodejs"])
def test_separator_insensitive(catalogue, text):
    assert "Node.js" in extract_skills(f"backend work in {text} daily", catalogue)


def test_dotted_suffix_does_not_leak_shorter_alias(catalogue):
    found = extract_skills("Built services in Node.js", catalogue)
    assert "Node.js" in found
    assert "JavaScript" not in found


def test_sentence_final_period(catalogue):
    assert "React" in extract_skills("I know React.", catalogue)


def test_leading_dot_alias(catalogue):
    assert ".NET" in extract_skills("Senior .NET developer", catalogue)


def test_symbol_skills(catalogue):
    found = extract_skills("Languages: C++ and C#", catalogue)
    assert "C++" in found
    assert "C#" in found
    assert "C" not in found


def test_unicode_letters_are_word_characters(catalogue):
    assert "Leadership" not in extract_skills("Führungskraft gesucht", catalogue)
    assert "Teamwork" in extract_skills("Teamfähigkeit und Ehrgeiz", catalogue)


def test_hyphenated_line_break_in_raw_text(catalogue):
    assert "Project Management" in extract_skills("Erfahrung im Projekt-\nmanagement", catalogue)


@pytest.mark.parametrize("text", ["", None, "   \n\t", "nothing to see here"])
def test_no_skills(text):
    cat = SkillCatalogue(static_entries=[SkillEntry("Python", aliases=("python",))])
    assert extract_skills(text, cat) == []


def test_entry_without_aliases_matches_its_name():
    cat = SkillCatalogue(static_entries=[SkillEntry("Docker")])
    assert extract_skills("ships with docker", cat) == ["Docker"]


def test_rebuilds_when_catalogue_changes():
    cat = SkillCatalogue(static_entries=[SkillEntry("Python", aliases=("python",))])
    extractor = SkillExtractor(cat)
    assert extractor.extract("python and rust") == ["Python"]
    arena = extractor.matchers()
    assert extractor.matchers() is arena

    cat.add("Rust", "Programming", ["rust"])
    assert extractor.extract("python and rust") == ["Python", "Rust"]


def test_alias_pattern_tokens():
    assert alias_pattern("node js") == alias_pattern("Node.js") == alias_pattern("node-js")
    assert alias_pattern("c++") == r"c\+\+"
    assert alias_pattern("  ") is None


def test_default_catalogue_used_when_none_given():
    assert "Python" in extract_skills("python developer")
