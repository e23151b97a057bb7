import json
import os

from imgloading.until.log import LOGGER
from imgloading.until.resource import get_resource_path

CONFIG_ENV = "IMGLOADING_CONFIG"
DEFAULT_CONFIG_PATH = "config/loading.json"


def get_config_path():
    """配置文件路径，可以用环境变量 IMGLOADING_CONFIG 覆盖"""
    return os.environ.get(CONFIG_ENV) or get_resource_path(DEFAULT_CONFIG_PATH)


def load_config(key, default=None):
    """加载配置

    Args:
        key: 顶层配置项，例如 "loading"
        default: 文件或配置项不存在时的返回值
    """
    if default is None:
        default = {}
    config_path = get_config_path()

    if os.path.exists(config_path):
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except (OSError, ValueError) as e:
            LOGGER.error(f"can't read config {config_path}: {e}")
            return default
        return config.get(key, default)

    # 默认配置
    return default
