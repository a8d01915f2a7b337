import pytest

from gamekit.catalog import DEFAULT_TEMPLATES, TemplateCatalog
from gamekit.errors import NotFound
from gamekit.evaluators import EvaluatorFactory


def test_loads_templates_from_csv(tmp_path):
    path = tmp_path / "templates.csv"
    path.write_text(
        "slug,name,description,is_life_based,is_time_limit_based\n"
        "anagram,Anagram,,False,False\n"
        "find-the-match,Find the Match,Pairs,True,False\n",
        encoding="utf-8",
    )
    catalog = TemplateCatalog(str(path))
    catalog.load_all()

    assert catalog.get("anagram").description == ""
    assert catalog.get("find-the-match").is_life_based is True
    assert catalog.get("crossword") is None
    assert [t.slug for t in catalog.list_templates()] == ["anagram", "find-the-match"]


def test_missing_columns_fall_back_to_builtins(tmp_path):
    path = tmp_path / "templates.csv"
    path.write_text("id,title\n1,Anagram\n", encoding="utf-8")
    catalog = TemplateCatalog(str(path))
    catalog.load_all()

    assert catalog.get("crossword") is not None


def test_missing_file_falls_back_to_builtins(tmp_path):
    catalog = TemplateCatalog(str(tmp_path / "nope.csv"))
    catalog.load_all()

    assert len(catalog.list_templates()) == 6


@pytest.mark.parametrize("template", DEFAULT_TEMPLATES, ids=lambda t: t["slug"])
def test_every_builtin_template_has_an_evaluator(template):
    assert EvaluatorFactory.create(template["slug"]).slug == template["slug"]


def test_unknown_slug_has_no_evaluator():
    with pytest.raises(NotFound):
        EvaluatorFactory.create("jeopardy")
