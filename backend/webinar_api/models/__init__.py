from webinar_api.models.webinar import WebinarRecord

__all__ = ["WebinarRecord"]
