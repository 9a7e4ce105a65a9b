"""
どこで: `green.common` パッケージ。
何を: 環境変数パース・型付き設定・ロギング初期化などの軽量共通基盤。
なぜ: 下位層（engine）と公開 API の双方から再利用する基盤を分離し、依存の向きを単純化するため。
"""
