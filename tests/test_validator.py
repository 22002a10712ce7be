from org_chart import catalog
from org_chart.graph.validator import TreeValidator
from org_chart.models.org_node import Headcount


class TestTreeValidator:
    """Tests for TreeValidator."""

    def test_generated_chart_is_valid(self, default_tree):
        report = TreeValidator().validate(default_tree)

        assert report["is_valid"] is True
        assert report["within_budget"] is True
        assert report["node_count"] <= 10000
        assert report["max_depth"] <= 8

    def test_hand_built_tree_is_valid(self, sample_tree):
        report = TreeValidator().validate(sample_tree)

        assert report["is_valid"] is True
        assert report["node_count"] == 4
        assert report["max_depth"] == 2

    def test_level_mismatch(self, make_node):
        skipped = make_node(level=2)
        root = make_node(level=0, children=[skipped])

        report = TreeValidator().validate(root)

        assert report["level_mismatches"] == 1
        assert report["is_valid"] is False

    def test_managerial_mismatch(self, make_node):
        wrong = make_node(level=1, is_managerial=False)
        root = make_node(level=0, children=[wrong])

        report = TreeValidator().validate(root)

        assert report["managerial_mismatches"] == 1
        assert report["is_valid"] is False

    def test_job_function_mismatch(self, make_node):
        wrong = make_node(level=1, department="Sales", job_function=catalog.JOB_FUNCTIONS[2])
        root = make_node(level=0, children=[wrong])

        report = TreeValidator().validate(root)

        assert report["job_function_mismatches"] == 1
        assert report["is_valid"] is False

    def test_children_below_max_level(self, make_node):
        grandchild = make_node(level=2)
        child = make_node(level=1, children=[grandchild])
        root = make_node(level=0, children=[child])

        report = TreeValidator(max_level=1).validate(root)

        assert report["children_past_max_level"] == 1
        assert report["max_depth"] == 2
        assert report["is_valid"] is False

    def test_over_budget(self, sample_tree):
        report = TreeValidator(node_budget=3).validate(sample_tree)

        assert report["within_budget"] is False
        assert report["is_valid"] is False

    def test_root_must_have_fixed_headcount(self, make_node):
        root = make_node(level=0, headcount=Headcount.of(2, 0, 0))

        report = TreeValidator().validate(root)

        assert report["root_ok"] is False
        assert report["is_valid"] is False

    def test_duplicate_ids_reported_but_tolerated(self, make_node):
        first = make_node(level=1, id="same")
        second = make_node(level=1, id="same")
        root = make_node(level=0, children=[first, second])

        report = TreeValidator().validate(root)

        assert report["duplicate_ids"] == 1
        assert report["is_valid"] is True
