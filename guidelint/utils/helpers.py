"""Yardımcı fonksiyonlar."""


def format_size(size_bytes: float) -> str:
    """Dosya boyutunu okunabilir formata çevir."""
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size_bytes < 1024:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024
    return f"{size_bytes:.1f} TB"


def truncate_text(text: str, max_length: int = 100) -> str:
    """Metni belirli uzunlukta kes."""
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."
