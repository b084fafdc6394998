# app/core/error_types.py

# 文件大小校验失败类型（与配置的边界一一对应）
FILE_SIZE_NOT_LESS_THAN = "file_size_not_less_than"
FILE_SIZE_NOT_LESS_THAN_OR_EQUAL_TO = "file_size_not_less_than_or_equal_to"
FILE_SIZE_NOT_GREATER_THAN = "file_size_not_greater_than"
FILE_SIZE_NOT_GREATER_THAN_OR_EQUAL_TO = "file_size_not_greater_than_or_equal_to"
FILE_SIZE_NOT_BETWEEN = "file_size_not_between"

# 默认错误文案（占位符来自 error options）
DEFAULT_MESSAGES = {
    FILE_SIZE_NOT_LESS_THAN: "file size must be less than {max_size} (current size is {file_size})",
    FILE_SIZE_NOT_LESS_THAN_OR_EQUAL_TO: "file size must be less than or equal to {max_size} (current size is {file_size})",
    FILE_SIZE_NOT_GREATER_THAN: "file size must be greater than {min_size} (current size is {file_size})",
    FILE_SIZE_NOT_GREATER_THAN_OR_EQUAL_TO: "file size must be greater than or equal to {min_size} (current size is {file_size})",
    FILE_SIZE_NOT_BETWEEN: "file size must be between {min_size} and {max_size} (current size is {file_size})",
}
