"""
资源路径处理模块
用于处理开发环境和 PyInstaller 打包后的资源路径
"""
import os
import sys


def get_project_root():
    """
    获取项目根目录

    Returns:
        项目根目录的绝对路径
    """
    if getattr(sys, 'frozen', False) and hasattr(sys, '_MEIPASS'):
        return sys._MEIPASS
    # imgloading/until/resource.py -> 项目根目录
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def get_resource_path(relative_path):
    """
    获取资源文件的绝对路径

    Args:
        relative_path: 相对于项目根目录的路径，例如 "config/loading.json"
    """
    return os.path.join(get_project_root(), relative_path)
