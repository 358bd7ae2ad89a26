# sce_portal/rbac/permissions.py
ALL = "all"
READ_ALL = "read:all"
READ_PUBLIC = "read:public"
CREATE_POST = "create:post"
EDIT_POST = "edit:post"
EDIT_OWN_POST = "edit:own:post"
CREATE_OBJECT = "create:object"
EDIT_OBJECT = "edit:object"

# Permission strings are compared for exact equality; only ALL acts as a
# wildcard.
CORE_PERMISSIONS = [
    {"code": ALL, "description": "Full system administration"},
    {"code": READ_ALL, "description": "Read all materials"},
    {"code": READ_PUBLIC, "description": "Read public materials"},
    {"code": CREATE_POST, "description": "Create posts"},
    {"code": EDIT_POST, "description": "Edit any post"},
    {"code": EDIT_OWN_POST, "description": "Edit own posts"},
    {"code": CREATE_OBJECT, "description": "Register new SCE objects"},
    {"code": EDIT_OBJECT, "description": "Edit SCE objects"},
]

PERMISSION_CODES = frozenset(p["code"] for p in CORE_PERMISSIONS)
