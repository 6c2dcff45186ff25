"""f3write / f3read 儲存裝置容量檢測工具。"""

__version__ = "0.1.0"
