"""
后端路径与界面常量
"""

# 后端路径片段
STRINGS_PATH = "/strings"
STATE_PATH = "/state"
SPLITTER_PATH = "/splitter"
SPLIT_PATH = "/split"
PROPERTIES_PATH = "/properties"
TWO_PROP_PATH = "/twoProp"
CRASH_PATH = "/crash"

# 分隔符为空格时界面显示的占位符
SPACE_PLACEHOLDER = "[SPACE]"

JSON_CONTENT_TYPE = "application/json"

# 用户可见的失败提示
MSG_GET_STATE_FAILED = "Failed to get state!"
MSG_SET_STATE_FAILED = "Failed to set state!"
MSG_GET_SPLITTER_FAILED = "Failed to get splitter!"
MSG_SET_SPLITTER_FAILED = "Failed to set splitter!"
MSG_GET_TWO_PROP_FAILED = "Failed to get two-property object!"
MSG_CRASHED = "Web service has crashed!"
MSG_GET_SPLIT_STATE_FAILED = "Failed to get split state!"
MSG_GET_PROPERTIES_FAILED = "Failed to get properties!"
