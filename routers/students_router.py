import logging
import re
from typing import Optional
from bson import ObjectId
from fastapi import APIRouter, Depends

from database import MongoStore
from typings.student import StudentPayload
from util.response import validation_error
from utils import get_store, parse_date, serialize, validate_object_id

router = APIRouter()
logger = logging.getLogger(__name__)


def build_student(payload: StudentPayload):
    """
    Check the required fields and build the document to store
    """
    if not payload.name:
        raise validation_error("A Name must be provided")
    if not payload.age:
        raise validation_error("Age must be provided")
    if not isinstance(payload.subjects, list):
        raise validation_error("Subjects must be provided and must be an array")

    return {
        "name": payload.name,
        "age": payload.age,
        "subjects": [
            {"_id": ObjectId(), "name": subject} for subject in payload.subjects
        ],
        "dateEnrolled": parse_date(payload.dateEnrolled),
    }


@router.get("")
async def read_students(
    name: Optional[str] = None,
    subjects: Optional[str] = None,
    store: MongoStore = Depends(get_store),
):
    """
    Query students by name and/or subject
    """
    criteria = {}
    if name:
        criteria["name"] = {"$regex": re.escape(name), "$options": "i"}
    if subjects:
        criteria["subjects.name"] = subjects

    logger.debug("student criteria: %s", criteria)
    result = await store.find("students", criteria)
    return {"students": serialize(result)}


@router.post("")
async def create_student(
    payload: StudentPayload, store: MongoStore = Depends(get_store)
):
    """
    Create a student
    """
    student = build_student(payload)
    inserted_id = await store.insert_one("students", student)
    return {
        "result": {"acknowledged": True, "insertedId": str(inserted_id)},
    }


@router.put("/{student_oid}")
async def replace_student(
    student_oid: str, payload: StudentPayload, store: MongoStore = Depends(get_store)
):
    """
    Replace every mutable field of a student
    """
    _id = validate_object_id(student_oid)
    student = build_student(payload)
    # Matching nothing is still reported as success
    await store.update_one("students", {"_id": _id}, {"$set": student})
    return {"result": serialize({"_id": _id, **student})}


@router.delete("/{student_oid}")
async def delete_student(student_oid: str, store: MongoStore = Depends(get_store)):
    """
    Remove a student
    """
    await store.delete_one("students", {"_id": validate_object_id(student_oid)})
    return {"message": "Deleted"}
