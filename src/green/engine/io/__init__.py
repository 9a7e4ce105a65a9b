"""
どこで: `green.engine.io` サブパッケージ。
何を: フレーム単位の入力状態 `InputState` と、pyglet イベントからの変換ヘルパを提供。
なぜ: 入力の記録/照会をウィンドウ実装から切り離し、ヘッドレスでも検証可能にするため。
"""

from .input_state import InputKey, InputState, MouseButton

__all__ = ["InputKey", "InputState", "MouseButton"]
