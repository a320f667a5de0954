import sys
import os


def get_resource_path(relative_path):
    """
    リソースファイルの絶対パスを取得する。
    開発環境とPyInstallerによるEXE環境の両方に対応。

    Args:
        relative_path (str): resourcesフォルダからの相対パス (例: "config/keyboard_config.yml")

    Returns:
        str: リソースファイルの絶対パス
    """
    if getattr(sys, 'frozen', False):
        # EXEのあるフォルダを基準にする
        base_path = os.path.dirname(sys.executable)
        resource_path = os.path.join(base_path, "resources", relative_path)
    else:
        # 構成: project_root/keyfeedback/paths.py
        # リソース: project_root/resources/
        current_dir = os.path.dirname(os.path.abspath(__file__))
        project_root = os.path.dirname(current_dir)
        resource_path = os.path.join(project_root, "resources", relative_path)

    return os.path.abspath(resource_path)
