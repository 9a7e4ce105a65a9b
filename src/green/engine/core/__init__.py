"""
どこで: `green.engine.core` サブパッケージ。
何を: World/Actor・フレーム駆動（Tickable/FrameClock）・描画ウィンドウ・例外を提供。
なぜ: スケッチの場面構成とフレーム更新の基盤を構成し、上位層（ファサード/ランナー）から再利用可能にするため。
"""
