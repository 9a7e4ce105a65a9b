"""
どこで: `green.engine.core.errors`。
何を: ライブラリ固有の例外（単一インスタンス違反/World 未ロード）を定義。
なぜ: ファサード・World・Actor の間で循環 import なしに同じ例外型を共有するため。
"""


class SingleInstanceError(Exception):
    """`Green` をプロセス内で 2 度生成しようとした場合に送出される例外。"""

    def __init__(self, message: str = "Green has already been instantiated; use Green.get_instance()"):
        super().__init__(message)


class NoWorldError(Exception):
    """World が必要な操作を、World 未ロード/未所属の状態で呼んだ場合に送出される例外。"""

    def __init__(self, message: str = "no World is loaded"):
        super().__init__(message)
