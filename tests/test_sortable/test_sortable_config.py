"""SortableConfig 解析测试"""

import pytest

from sortkit.sortable import DEFAULT_ORDER_COLUMN, SortableConfig, SortableMixin


class TestSortableConfigFromMapping:
    """从 __sortable__ 字典解析配置"""

    @pytest.mark.parametrize("options", [None, {}])
    def test_missing_options_use_defaults(self, options):
        config = SortableConfig.from_mapping(options)

        assert config.order_column_name == DEFAULT_ORDER_COLUMN == "order_column"
        assert config.sort_when_creating is True
        assert config.start_order == 1

    @pytest.mark.parametrize("column", ["", None])
    def test_empty_column_name_falls_back(self, column):
        config = SortableConfig.from_mapping({"order_column_name": column})

        assert config.order_column_name == "order_column"

    def test_missing_flag_is_true(self):
        config = SortableConfig.from_mapping({"order_column_name": "position"})

        assert config.order_column_name == "position"
        assert config.sort_when_creating is True

    def test_explicit_false_flag(self):
        config = SortableConfig.from_mapping({"sort_when_creating": False})

        assert config.sort_when_creating is False

    def test_defaults_object_is_used(self):
        defaults = SortableConfig(order_column_name="rank", sort_when_creating=False, start_order=0)

        config = SortableConfig.from_mapping({"start_order": 10}, defaults=defaults)

        assert config == SortableConfig(order_column_name="rank", sort_when_creating=False, start_order=10)

    def test_config_is_frozen(self):
        config = SortableConfig()

        with pytest.raises(AttributeError):
            config.order_column_name = "other"


class TestGlobalSortableSettings:
    """全局 SortableSettings 作为 __sortable__ 的默认值"""

    def test_env_defaults_fill_missing_options(self, monkeypatch):
        monkeypatch.setenv("SORTKIT_SORT_SORT_WHEN_CREATING", "false")
        monkeypatch.setenv("SORTKIT_SORT_START_ORDER", "0")

        class Playlist(SortableMixin):
            __sortable__ = {"order_column_name": "position"}

        config = Playlist.sortable_config()

        assert config.order_column_name == "position"
        assert config.sort_when_creating is False
        assert config.start_order == 0

    def test_class_options_override_env(self, monkeypatch):
        monkeypatch.setenv("SORTKIT_SORT_ORDER_COLUMN_NAME", "weight")

        class Track(SortableMixin):
            __sortable__ = {"order_column_name": "rank", "sort_when_creating": True}

        class Album(SortableMixin):
            pass

        assert Track.sortable_config().order_column_name == "rank"
        assert Track.sortable_config().sort_when_creating is True
        assert Album.sortable_config().order_column_name == "weight"
