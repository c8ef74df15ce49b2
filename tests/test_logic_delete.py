"""論理削除マーカー解決のテスト."""

from __future__ import annotations

from sqlfield.config import DbConfig, LogicDeleteOptions
from sqlfield.logic_delete import LogicDeleteMarkers, resolve_logic_delete


class TestResolveLogicDelete:
    """resolve_logic_delete の解決規則."""

    def test_global_not_configured(self) -> None:
        """グローバルに値がなければ個別設定があっても対象外."""
        markers = resolve_logic_delete(DbConfig(), LogicDeleteOptions(value="0", delval="1"))
        assert markers.enabled is False
        assert markers.delete_value is None
        assert markers.not_delete_value is None

    def test_no_override(self) -> None:
        """個別設定がなければ対象外."""
        config = DbConfig(logic_delete_value="1", logic_not_delete_value="0")
        assert resolve_logic_delete(config, None) == LogicDeleteMarkers()

    def test_override_without_values(self) -> None:
        """個別設定の値が空ならグローバルの値を使う."""
        config = DbConfig(logic_delete_value="1", logic_not_delete_value="0")
        markers = resolve_logic_delete(config, LogicDeleteOptions())
        assert markers.delete_value == "1"
        assert markers.not_delete_value == "0"
        assert markers.enabled is True

    def test_override_values(self) -> None:
        """個別設定の値を優先する."""
        config = DbConfig(logic_delete_value="1", logic_not_delete_value="0")
        markers = resolve_logic_delete(config, LogicDeleteOptions(value="N", delval="Y"))
        assert markers.delete_value == "Y"
        assert markers.not_delete_value == "N"

    def test_partial_override(self) -> None:
        """片方だけの個別設定は残りをグローバルで補う."""
        config = DbConfig(logic_delete_value="1", logic_not_delete_value="0")
        markers = resolve_logic_delete(config, LogicDeleteOptions(delval="9"))
        assert markers.delete_value == "9"
        assert markers.not_delete_value == "0"

    def test_empty_global_delete_value(self) -> None:
        """グローバルの値が空文字列なら解決しても無効."""
        config = DbConfig(logic_delete_value="")
        markers = resolve_logic_delete(config, LogicDeleteOptions())
        assert markers.enabled is False
