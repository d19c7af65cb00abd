"""Seed records for the mock provider, per business type.

Dates are epoch milliseconds. Records omit audit strings; the repository
fills them in when loading.
"""

from typing import Any, Dict, List

from ....config.constants import BusinessType

JAN_2024 = 1704067200000
DAY = 86_400_000

EDUCATION: Dict[str, List[Dict[str, Any]]] = {
    "workspace": [
        {"id": "workspace-math", "name": "Mathematics Department", "description": "Algebra, calculus and statistics courses", "private": False, "date_created": JAN_2024},
        {"id": "workspace-science", "name": "Science Lab", "description": "Physics and chemistry laboratory sessions", "private": False, "date_created": JAN_2024 + DAY},
        {"id": "workspace-admin", "name": "School Administration", "description": "Enrollment, billing and staff records", "private": True, "date_created": JAN_2024 + 2 * DAY},
        {"id": "workspace-archive", "name": "Archived Term 2023", "description": "Read-only records from the previous term", "private": True, "active": False, "date_created": JAN_2024 - 90 * DAY},
    ],
    "user": [
        {"id": "user-ada", "first_name": "Ada", "last_name": "Lovelace", "email_address": "ada@school.edu", "date_created": JAN_2024},
        {"id": "user-alan", "first_name": "Alan", "last_name": "Turing", "email_address": "alan@school.edu", "date_created": JAN_2024 + DAY},
        {"id": "user-grace", "first_name": "Grace", "last_name": "Hopper", "email_address": "grace@school.edu", "date_created": JAN_2024 + 2 * DAY},
    ],
    "client": [
        {"id": "client-001", "user_id": "user-ada", "internal_id": "STU-1001", "name": "Maria Santos", "email": "maria.santos@student.edu", "date_created": JAN_2024},
        {"id": "client-002", "user_id": "user-alan", "internal_id": "STU-1002", "name": "Juan dela Cruz", "email": "juan.delacruz@student.edu", "date_created": JAN_2024 + DAY},
        {"id": "client-003", "user_id": "user-grace", "internal_id": "STU-1003", "name": "Liza Reyes", "email": "liza.reyes@student.edu", "date_created": JAN_2024 + 2 * DAY},
    ],
    "role": [
        {"id": "role-teacher", "name": "Teacher", "description": "Manages classes and grades", "color": "#1E88E5", "workspace_id": "workspace-math"},
        {"id": "role-student", "name": "Student", "description": "Attends classes", "color": "#43A047", "workspace_id": "workspace-math"},
        {"id": "role-lab-assistant", "name": "Lab Assistant", "description": "Prepares lab equipment", "color": "#FB8C00", "workspace_id": "workspace-science"},
    ],
    "payment": [
        {"id": "payment-001", "name": "Tuition Q1", "subscription_id": "subscription-001", "amount": 1200.0, "currency": "USD"},
        {"id": "payment-002", "name": "Lab Fee", "subscription_id": "subscription-002", "amount": 150.0, "currency": "USD"},
    ],
    "payment_method": [
        {"id": "payment_method-001", "name": "Parent Visa", "method_type": "card", "cardholder_name": "Rosa Santos", "last_four_digits": "4242", "expiry_month": 12, "expiry_year": 2030},
        {"id": "payment_method-002", "name": "School Fund Account", "method_type": "bank_account", "bank_name": "First Education Bank", "account_last_four": "9876"},
    ],
    "product": [
        {"id": "product-algebra", "name": "Algebra I", "description": "Introductory algebra course"},
        {"id": "product-calculus", "name": "Calculus", "description": "Differential and integral calculus"},
        {"id": "product-chemistry", "name": "Chemistry Lab", "description": "Hands-on chemistry experiments"},
    ],
    "collection": [
        {"id": "collection-math", "name": "Mathematics Track", "description": "All mathematics courses"},
        {"id": "collection-science", "name": "Science Track", "description": "All science courses"},
    ],
    "plan": [
        {"id": "plan-semester", "name": "Semester Plan", "description": "Full semester enrollment"},
        {"id": "plan-summer", "name": "Summer Session", "description": "Six week summer classes"},
    ],
    "price_plan": [
        {"id": "price_plan-semester-usd", "plan_id": "plan-semester", "name": "Semester USD", "description": "Semester tuition", "amount": 4800.0, "currency": "USD"},
        {"id": "price_plan-summer-usd", "plan_id": "plan-summer", "name": "Summer USD", "description": "Summer tuition", "amount": 900.0, "currency": "USD"},
    ],
    "subscription": [
        {"id": "subscription-001", "name": "Maria Santos Semester", "client_id": "client-001", "price_plan_id": "price_plan-semester-usd"},
        {"id": "subscription-002", "name": "Juan dela Cruz Summer", "client_id": "client-002", "price_plan_id": "price_plan-summer-usd"},
    ],
    "invoice": [
        {"id": "invoice-001", "invoice_number": "INV-2024-001", "subscription_id": "subscription-001", "amount": 1200.0, "currency": "USD"},
        {"id": "invoice-002", "invoice_number": "INV-2024-002", "subscription_id": "subscription-002", "amount": 900.0, "currency": "USD"},
    ],
    "workflow": [
        {"id": "workflow-enrollment", "name": "Student Enrollment", "description": "Admission through first class", "status": "active", "version": 2, "workspace_id": "workspace-admin", "created_by": "user-grace"},
        {"id": "workflow-grading", "name": "Term Grading", "description": "Collect and publish grades", "status": "draft", "version": 1, "workspace_id": "workspace-math", "created_by": "user-ada"},
    ],
    "stage": [
        {"id": "stage-application", "workflow_instance_id": "workflow-enrollment", "stage_template_id": "stage_template-application", "name": "Application Review", "status": "completed", "priority": 1, "assigned_to": "user-grace", "start_date": JAN_2024, "end_date": JAN_2024 + 7 * DAY},
        {"id": "stage-payment", "workflow_instance_id": "workflow-enrollment", "stage_template_id": "stage_template-payment", "name": "Tuition Payment", "status": "in_progress", "priority": 2, "assigned_to": "user-alan", "start_date": JAN_2024 + 7 * DAY},
    ],
    "activity": [
        {"id": "activity-documents", "stage_id": "stage-application", "activity_template_id": "activity_template-documents", "name": "Verify documents", "status": "completed", "priority": 1, "assigned_to": "user-grace", "due_date": JAN_2024 + 3 * DAY},
        {"id": "activity-invoice", "stage_id": "stage-payment", "activity_template_id": "activity_template-invoice", "name": "Send invoice", "status": "pending", "priority": 2, "assigned_to": "user-alan", "due_date": JAN_2024 + 10 * DAY},
    ],
    "event": [
        {"id": "event-orientation", "name": "Orientation Day", "description": "Welcome session for new students", "start_date_time_utc": JAN_2024 + 14 * DAY, "end_date_time_utc": JAN_2024 + 14 * DAY + 3 * 3_600_000, "timezone": "Asia/Manila", "client_id": "client-001"},
        {"id": "event-science-fair", "name": "Science Fair", "description": "Student science project exhibition", "start_date_time_utc": JAN_2024 + 60 * DAY, "end_date_time_utc": JAN_2024 + 60 * DAY + 6 * 3_600_000, "timezone": "Asia/Manila", "client_id": "client-002"},
    ],
}

FITNESS_CENTER: Dict[str, List[Dict[str, Any]]] = {
    "workspace": [
        {"id": "workspace-main-gym", "name": "Main Gym Floor", "description": "Weights and cardio equipment", "private": False, "date_created": JAN_2024},
        {"id": "workspace-studio", "name": "Yoga Studio", "description": "Yoga and pilates classes", "private": False, "date_created": JAN_2024 + DAY},
    ],
    "user": [
        {"id": "user-coach-sam", "first_name": "Sam", "last_name": "Rivera", "email_address": "sam@fitclub.com", "date_created": JAN_2024},
    ],
    "client": [
        {"id": "client-101", "user_id": "user-coach-sam", "internal_id": "MEM-2001", "name": "Chris Park", "email": "chris.park@example.com", "date_created": JAN_2024},
        {"id": "client-102", "user_id": "user-coach-sam", "internal_id": "MEM-2002", "name": "Dana Lee", "email": "dana.lee@example.com", "date_created": JAN_2024 + DAY},
    ],
    "role": [
        {"id": "role-trainer", "name": "Trainer", "description": "Runs personal training sessions", "color": "#E53935", "workspace_id": "workspace-main-gym"},
    ],
    "product": [
        {"id": "product-personal-training", "name": "Personal Training", "description": "One-on-one coaching session"},
        {"id": "product-yoga-class", "name": "Yoga Class", "description": "Group yoga session"},
    ],
    "plan": [
        {"id": "plan-monthly", "name": "Monthly Membership", "description": "Unlimited gym access for a month"},
    ],
    "price_plan": [
        {"id": "price_plan-monthly-usd", "plan_id": "plan-monthly", "name": "Monthly USD", "description": "Monthly membership fee", "amount": 59.0, "currency": "USD"},
    ],
    "subscription": [
        {"id": "subscription-101", "name": "Chris Park Monthly", "client_id": "client-101", "price_plan_id": "price_plan-monthly-usd"},
    ],
    "event": [
        {"id": "event-bootcamp", "name": "Saturday Bootcamp", "description": "Outdoor group workout", "start_date_time_utc": JAN_2024 + 5 * DAY, "end_date_time_utc": JAN_2024 + 5 * DAY + 2 * 3_600_000, "timezone": "UTC", "client_id": "client-102"},
    ],
}

SEED_DATA: Dict[str, Dict[str, List[Dict[str, Any]]]] = {
    BusinessType.EDUCATION.value: EDUCATION,
    BusinessType.FITNESS_CENTER.value: FITNESS_CENTER,
}


def load_seed(business_type: str, entity: str) -> List[Dict[str, Any]]:
    """Seed rows for an entity; unknown business types or entities yield none."""
    return [dict(row) for row in SEED_DATA.get(business_type, {}).get(entity, [])]
