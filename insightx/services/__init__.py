from insightx.services.report_service import InsightXReportService

__all__ = ["InsightXReportService"]
