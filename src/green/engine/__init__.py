"""
どこで: `green.engine`。
何を: 場面（World/Actor）・フレーム駆動・入力状態・ウィンドウを束ねる下位層。
なぜ: 公開 API（`green`）とホスト（pyglet）依存部分の間に層を設けるため。
"""
