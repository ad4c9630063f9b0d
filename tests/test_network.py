import pytest
from discovery.models import Dataset, Faculty, Project
from discovery.network import interests_of, match_colleagues, match_label, match_projects
from etl.fallback import fallback_dataset


@pytest.fixture
def dataset():
    return fallback_dataset()


class TestInterests:

    def test_merges_keywords_and_interests_lowercased(self):
        f = Faculty(id="1", name="Ada", ai_keywords=["AI", "robotics"],
                    research_interests=["Robotics", "Control Theory"])
        assert interests_of(f) == ["ai", "robotics", "control theory"]


class TestColleagueMatching:
    """Test deterministic colleague suggestions."""

    def test_excludes_self(self, dataset):
        ids = [m.id for m in match_colleagues("1", dataset)]
        assert "1" not in ids
        assert len(ids) == 2

    def test_no_shared_interests(self, dataset):
        matches = match_colleagues("1", dataset)
        assert [m.id for m in matches] == ["2", "3"]
        assert all(m.match_score == 50 for m in matches)
        assert matches[0].match_reason == "Complementary expertise in Business Administration."

    def test_shared_interests_raise_score(self):
        dataset = Dataset(faculty=[
            Faculty(id="a", name="A", ai_keywords=["ecology", "conservation", "genomics"]),
            Faculty(id="b", name="B", ai_keywords=["chemistry"]),
            Faculty(id="c", name="C", ai_keywords=["Ecology"], research_interests=["Conservation"]),
        ])
        matches = match_colleagues("a", dataset)
        assert [m.id for m in matches] == ["c", "b"]
        assert matches[0].match_score == 74
        assert matches[0].shared_keywords == ["ecology", "conservation"]
        assert matches[0].match_reason == "Shared expertise in ecology, conservation."

    def test_score_capped(self):
        keywords = [f"topic{i}" for i in range(10)]
        dataset = Dataset(faculty=[
            Faculty(id="a", name="A", ai_keywords=keywords),
            Faculty(id="b", name="B", ai_keywords=keywords),
        ])
        assert match_colleagues("a", dataset)[0].match_score == 95

    def test_member_without_interests(self):
        dataset = Dataset(faculty=[
            Faculty(id="a", name="A"),
            Faculty(id="b", name="B", department=""),
        ])
        match = match_colleagues("a", dataset)[0]
        assert match.match_score == 55
        assert match.match_reason == "Complementary expertise in related fields."

    def test_unknown_faculty(self, dataset):
        with pytest.raises(KeyError):
            match_colleagues("missing", dataset)

    def test_deterministic(self, dataset):
        assert match_colleagues("3", dataset) == match_colleagues("3", dataset)


class TestProjectMatching:
    """Test project opportunity scoring."""

    def test_overlap_ranks_first(self, dataset):
        opportunities = match_projects("1", dataset)
        assert [o.id for o in opportunities] == ["r1", "r2", "r3"]
        assert opportunities[0].relevance_score == 62
        assert opportunities[0].relevance_reason == "Keyword overlap: artificial intelligence."
        assert opportunities[1].relevance_score == 52
        assert opportunities[1].relevance_reason == "Potential interdisciplinary fit."

    def test_defaults_for_blank_fields(self):
        dataset = Dataset(
            faculty=[Faculty(id="a", name="A")],
            projects=[Project(id="r", title="")],
        )
        opportunity = match_projects("a", dataset)[0]
        assert opportunity.title == "Untitled project"
        assert opportunity.status == "active"

    def test_unknown_faculty(self, dataset):
        with pytest.raises(KeyError):
            match_projects("missing", dataset)


class TestMatchLabel:

    @pytest.mark.parametrize("score,label", [
        (95, "Highly Compatible"), (80, "Highly Compatible"),
        (79, "Good Match"), (65, "Good Match"),
        (64, "Potential Match"), (50, "Potential Match"),
    ])
    def test_thresholds(self, score, label):
        assert match_label(score) == label
