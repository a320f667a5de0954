class KeyCode:
    """
    キーボードのキーコード定義。
    文字キーはUnicodeのコードポイント、機能キーは負の値を使う。
    """
    CODE_ENTER = ord("\n")
    CODE_SPACE = ord(" ")

    CODE_SHIFT = -1
    CODE_DELETE = -5

    # 特定のキーに紐付かないフィードバック要求（例: 長押しの振動のみ）
    CODE_UNSPECIFIED = -11
