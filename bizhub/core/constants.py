TASK_STATUSES = ("pending", "in_progress", "completed", "cancelled")
TASK_PRIORITIES = ("low", "medium", "high", "urgent")
CUSTOMER_STATUSES = ("active", "inactive", "pending")

NOTIFICATION_TYPES = ("info", "warning", "error", "success")
ENTITY_TYPES = ("task", "product", "inventory", "customer")

ALERTING_PRIORITIES = ("high", "urgent")
COMPLETED_STATUS = "completed"

UNKNOWN_PRODUCT_NAME = "Unknown Product"
UNKNOWN_PRODUCT_SKU = "N/A"
