# app/core/status_codes.py

# 成功
OK = 200

# 输入类
MISSING_ATTACHMENTS = 1001       # attachments 缺失或为空
INVALID_ATTRIBUTE_NAME = 1002    # attachments 的属性名与 Record 成员冲突
ATTACHMENT_SIZE_INVALID = 1003   # 至少一个附件大小不满足规则
