from fastapi import APIRouter, Depends

from database import MongoStore
from utils import get_store, serialize

router = APIRouter()


@router.post("/{subject_name}")
async def create_subject(subject_name: str, store: MongoStore = Depends(get_store)):
    """
    Create a subject, duplicates included
    """
    inserted_id = await store.insert_one("subjects", {"subjectName": subject_name})
    return {
        "result": {"acknowledged": True, "insertedId": str(inserted_id)},
    }


@router.get("")
async def read_subjects(store: MongoStore = Depends(get_store)):
    result = await store.find("subjects", {})
    return {"subjects": serialize(result)}


@router.delete("/{subject_name}")
async def delete_subject(subject_name: str, store: MongoStore = Depends(get_store)):
    """
    Remove the subject with this name
    """
    subject = await store.find_one("subjects", {"subjectName": subject_name})
    if subject is None:
        return {"message": "Subject not found"}
    await store.delete_one("subjects", {"_id": subject["_id"]})
    return {"message": "Deleted"}
