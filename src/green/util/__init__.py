"""
どこで: `green.util`。
何を: 設定読込・色・数学・画像処理の小さなユーティリティ群。
"""
