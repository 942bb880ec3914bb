"""`api.sketch` の補助モジュール群（設定解決/ウィンドウ初期化）。"""
