from lapordesa.services.laporan.laporan_service import LaporanService

__all__ = ["LaporanService"]
