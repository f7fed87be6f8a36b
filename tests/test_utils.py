from logfacade.utils.deep_merge import deep_merge


class TestDeepMerge:
    def test_nested_merge(self):
        base = {"a": 1, "nested": {"x": 1, "y": 2}}
        override = {"nested": {"y": 3, "z": 4}, "b": 2}

        assert deep_merge(base, override) == {"a": 1, "b": 2, "nested": {"x": 1, "y": 3, "z": 4}}

    def test_inputs_untouched(self):
        base = {"nested": {"x": 1}}
        override = {"nested": {"x": 2}}

        deep_merge(base, override)

        assert base == {"nested": {"x": 1}}
        assert override == {"nested": {"x": 2}}

    def test_non_dict_replaces_dict(self):
        assert deep_merge({"a": {"x": 1}}, {"a": None}) == {"a": None}
