# sce_portal/rbac/roles.py
from .permissions import (
    ALL,
    CREATE_OBJECT,
    CREATE_POST,
    EDIT_OBJECT,
    EDIT_OWN_POST,
    EDIT_POST,
    READ_ALL,
    READ_PUBLIC,
)

ADMIN_ROLE_ID = "admin"
RESEARCHER_ROLE_ID = "researcher"
READER_ROLE_ID = "reader"

# The first account ever registered gets ADMIN_ROLE_ID, every later one
# DEFAULT_ROLE_ID.
DEFAULT_ROLE_ID = READER_ROLE_ID

DEFAULT_ROLES = [
    {
        "id": ADMIN_ROLE_ID,
        "name": "Администратор",
        "permissions": [ALL],
        "level": 10,
    },
    {
        "id": RESEARCHER_ROLE_ID,
        "name": "Исследователь",
        "permissions": [READ_ALL, CREATE_POST, EDIT_POST, CREATE_OBJECT, EDIT_OBJECT],
        "level": 5,
    },
    {
        "id": READER_ROLE_ID,
        "name": "Читатель",
        "permissions": [READ_PUBLIC],
        "level": 1,
    },
]

DEFAULT_DEPARTMENTS = [
    {
        "id": "administration",
        "name": "Административный отдел",
        "description": "Управление Фондом SCE, координация работы отделов",
    },
    {
        "id": "research",
        "name": "Научный отдел",
        "description": "Исследование аномалий и разработка методов их содержания",
    },
    {
        "id": "security",
        "name": "Служба безопасности",
        "description": "Охрана объектов и контроль над содержащимися аномалиями",
    },
    {
        "id": "field",
        "name": "Полевой отдел",
        "description": "Обнаружение и захват аномалий",
    },
]

DEFAULT_POSITIONS = [
    {
        "id": "director",
        "name": "Директор",
        "department_id": "administration",
        "permissions": [ALL],
        "level": 10,
    },
    {
        "id": "senior_researcher",
        "name": "Старший исследователь",
        "department_id": "research",
        "permissions": [READ_ALL, CREATE_POST, EDIT_POST, CREATE_OBJECT, EDIT_OBJECT],
        "level": 7,
    },
    {
        "id": "security_chief",
        "name": "Начальник службы безопасности",
        "department_id": "security",
        "permissions": [READ_ALL, CREATE_POST, EDIT_POST],
        "level": 7,
    },
    {
        "id": "field_agent",
        "name": "Полевой агент",
        "department_id": "field",
        "permissions": [READ_ALL, CREATE_POST],
        "level": 5,
    },
    {
        "id": "researcher",
        "name": "Исследователь",
        "department_id": "research",
        "permissions": [READ_ALL, CREATE_POST, EDIT_OWN_POST],
        "level": 4,
    },
    {
        "id": "security_officer",
        "name": "Офицер безопасности",
        "department_id": "security",
        "permissions": [READ_ALL],
        "level": 3,
    },
    {
        "id": "intern",
        "name": "Стажер",
        "department_id": "research",
        "permissions": [READ_PUBLIC],
        "level": 1,
    },
]
