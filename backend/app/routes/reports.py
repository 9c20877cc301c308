# app/routes/reports.py
import logging

from fastapi import APIRouter, Depends

from app.middleware.rbac import get_current_email, verify_admin
from app.models.report import Report
from app.schemas.engagement import ReportCreate
from lifelessons.core.error_messages import ErrorResponses
from lifelessons.db.database import REPORTS, get_database
from lifelessons.serialize import delete_result, insert_result, serialize_list, to_object_id

logger = logging.getLogger(__name__)

reports_router = APIRouter(prefix="/reports", tags=["Reports"])


@reports_router.post("")
async def report_lesson(data: ReportCreate, email: str = Depends(get_current_email), db=Depends(get_database)):
    report = Report(**data.model_dump(), reporterEmail=email)
    result = await db[REPORTS].insert_one(report.model_dump())
    logger.info("Lesson %s reported by %s", data.lessonId, email)
    return insert_result(result)


# Admin: all reports
@reports_router.get("")
async def get_reports(admin=Depends(verify_admin), db=Depends(get_database)):
    reports = await db[REPORTS].find({}, sort=[("reportedAt", -1)]).to_list(length=None)
    return serialize_list(reports)


# Admin: dismiss a report
@reports_router.delete("/{report_id}")
async def delete_report(report_id: str, admin=Depends(verify_admin), db=Depends(get_database)):
    result = await db[REPORTS].delete_one({"_id": to_object_id(report_id)})
    if result.deleted_count == 0:
        raise ErrorResponses.REPORT_NOT_FOUND
    logger.info("Report %s deleted by %s", report_id, admin["email"])
    return delete_result(result)
