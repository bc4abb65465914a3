"""客户端异常"""


class RequestFailure(Exception):
    """请求失败（非 2xx 响应或网络错误）"""
    pass
