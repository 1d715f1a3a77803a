"""Data – JSON, file and download helpers."""
from beaver.data.files import download, write_file
from beaver.data.json_pod import JSON_MEDIA_TYPE, JSONPod

__all__ = ["JSON_MEDIA_TYPE", "JSONPod", "download", "write_file"]
