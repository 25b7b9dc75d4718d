from lapordesa.services.pengumuman.pengumuman_service import PengumumanService

__all__ = ["PengumumanService"]
