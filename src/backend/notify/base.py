from abc import ABC, abstractmethod


class BaseNotifier(ABC):
    """通知出力の抽象基底クラス

    新しい通知先を追加する場合は、このクラスを継承して実装する。
    現在の実装: DesktopNotifier (plyer), LogNotifier (ログ出力のみ)
    """

    @abstractmethod
    def request_permission(self) -> bool:
        """通知の許可を要求する

        Returns:
            bool: 許可された場合True、拒否された場合False
        """
        ...

    @abstractmethod
    def notify(self, title: str, message: str) -> bool:
        """通知を1回出力する

        Args:
            title: 通知タイトル
            message: 通知本文

        Returns:
            bool: 出力成功時True、失敗時False
        """
        ...
