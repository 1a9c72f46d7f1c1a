"""Surah and juz reference tables for the 604-page Madani Mushaf."""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from utils.common import TOTAL_PAGES


@dataclass(frozen=True)
class SurahInfo:
    id: int
    arabic_name: str
    english_name: str
    verse_count: int
    start_page: int
    revelation_place: str


@dataclass(frozen=True)
class JuzInfo:
    id: int
    start_page: int
    end_page: int
    start_surah: int
    start_ayah: int


SURAHS: Tuple[SurahInfo, ...] = (
    SurahInfo(1, "الفاتحة", "Al-Fatihah", 7, 1, "Makkah"),
    SurahInfo(2, "البقرة", "Al-Baqarah", 286, 2, "Madinah"),
    SurahInfo(3, "آل عمران", "Aal Imran", 200, 50, "Madinah"),
    SurahInfo(4, "النساء", "An-Nisa", 176, 77, "Madinah"),
    SurahInfo(5, "المائدة", "Al-Maidah", 120, 106, "Madinah"),
    SurahInfo(6, "الأنعام", "Al-An'am", 165, 128, "Makkah"),
    SurahInfo(7, "الأعراف", "Al-A'raf", 206, 151, "Makkah"),
    SurahInfo(8, "الأنفال", "Al-Anfal", 75, 177, "Madinah"),
    SurahInfo(9, "التوبة", "At-Tawbah", 129, 187, "Madinah"),
    SurahInfo(10, "يونس", "Yunus", 109, 208, "Makkah"),
    SurahInfo(11, "هود", "Hud", 123, 221, "Makkah"),
    SurahInfo(12, "يوسف", "Yusuf", 111, 235, "Makkah"),
    SurahInfo(13, "الرعد", "Ar-Ra'd", 43, 249, "Madinah"),
    SurahInfo(14, "إبراهيم", "Ibrahim", 52, 255, "Makkah"),
    SurahInfo(15, "الحجر", "Al-Hijr", 99, 262, "Makkah"),
    SurahInfo(16, "النحل", "An-Nahl", 128, 267, "Makkah"),
    SurahInfo(17, "الإسراء", "Al-Isra", 111, 282, "Makkah"),
    SurahInfo(18, "الكهف", "Al-Kahf", 110, 293, "Makkah"),
    SurahInfo(19, "مريم", "Maryam", 98, 305, "Makkah"),
    SurahInfo(20, "طه", "Ta-Ha", 135, 312, "Makkah"),
    SurahInfo(21, "الأنبياء", "Al-Anbiya", 112, 322, "Makkah"),
    SurahInfo(22, "الحج", "Al-Hajj", 78, 332, "Madinah"),
    SurahInfo(23, "المؤمنون", "Al-Mu'minun", 118, 342, "Makkah"),
    SurahInfo(24, "النور", "An-Nur", 64, 350, "Madinah"),
    SurahInfo(25, "الفرقان", "Al-Furqan", 77, 359, "Makkah"),
    SurahInfo(26, "الشعراء", "Ash-Shu'ara", 227, 367, "Makkah"),
    SurahInfo(27, "النمل", "An-Naml", 93, 377, "Makkah"),
    SurahInfo(28, "القصص", "Al-Qasas", 88, 385, "Makkah"),
    SurahInfo(29, "العنكبوت", "Al-Ankabut", 69, 396, "Makkah"),
    SurahInfo(30, "الروم", "Ar-Rum", 60, 404, "Makkah"),
    SurahInfo(31, "لقمان", "Luqman", 34, 411, "Makkah"),
    SurahInfo(32, "السجدة", "As-Sajdah", 30, 415, "Makkah"),
    SurahInfo(33, "الأحزاب", "Al-Ahzab", 73, 418, "Madinah"),
    SurahInfo(34, "سبأ", "Saba", 54, 428, "Makkah"),
    SurahInfo(35, "فاطر", "Fatir", 45, 434, "Makkah"),
    SurahInfo(36, "يس", "Ya-Sin", 83, 440, "Makkah"),
    SurahInfo(37, "الصافات", "As-Saffat", 182, 446, "Makkah"),
    SurahInfo(38, "ص", "Sad", 88, 453, "Makkah"),
    SurahInfo(39, "الزمر", "Az-Zumar", 75, 458, "Makkah"),
    SurahInfo(40, "غافر", "Ghafir", 85, 467, "Makkah"),
    SurahInfo(41, "فصلت", "Fussilat", 54, 477, "Makkah"),
    SurahInfo(42, "الشورى", "Ash-Shura", 53, 483, "Makkah"),
    SurahInfo(43, "الزخرف", "Az-Zukhruf", 89, 489, "Makkah"),
    SurahInfo(44, "الدخان", "Ad-Dukhan", 59, 496, "Makkah"),
    SurahInfo(45, "الجاثية", "Al-Jathiyah", 37, 499, "Makkah"),
    SurahInfo(46, "الأحقاف", "Al-Ahqaf", 35, 502, "Makkah"),
    SurahInfo(47, "محمد", "Muhammad", 38, 507, "Madinah"),
    SurahInfo(48, "الفتح", "Al-Fath", 29, 511, "Madinah"),
    SurahInfo(49, "الحجرات", "Al-Hujurat", 18, 515, "Madinah"),
    SurahInfo(50, "ق", "Qaf", 45, 518, "Makkah"),
    SurahInfo(51, "الذاريات", "Adh-Dhariyat", 60, 520, "Makkah"),
    SurahInfo(52, "الطور", "At-Tur", 49, 523, "Makkah"),
    SurahInfo(53, "النجم", "An-Najm", 62, 526, "Makkah"),
    SurahInfo(54, "القمر", "Al-Qamar", 55, 528, "Makkah"),
    SurahInfo(55, "الرحمن", "Ar-Rahman", 78, 531, "Madinah"),
    SurahInfo(56, "الواقعة", "Al-Waqi'ah", 96, 534, "Makkah"),
    SurahInfo(57, "الحديد", "Al-Hadid", 29, 537, "Madinah"),
    SurahInfo(58, "المجادلة", "Al-Mujadilah", 22, 542, "Madinah"),
    SurahInfo(59, "الحشر", "Al-Hashr", 24, 545, "Madinah"),
    SurahInfo(60, "الممتحنة", "Al-Mumtahanah", 13, 549, "Madinah"),
    SurahInfo(61, "الصف", "As-Saff", 14, 551, "Madinah"),
    SurahInfo(62, "الجمعة", "Al-Jumu'ah", 11, 553, "Madinah"),
    SurahInfo(63, "المنافقون", "Al-Munafiqun", 11, 554, "Madinah"),
    SurahInfo(64, "التغابن", "At-Taghabun", 18, 556, "Madinah"),
    SurahInfo(65, "الطلاق", "At-Talaq", 12, 558, "Madinah"),
    SurahInfo(66, "التحريم", "At-Tahrim", 12, 560, "Madinah"),
    SurahInfo(67, "الملك", "Al-Mulk", 30, 562, "Makkah"),
    SurahInfo(68, "القلم", "Al-Qalam", 52, 564, "Makkah"),
    SurahInfo(69, "الحاقة", "Al-Haqqah", 52, 566, "Makkah"),
    SurahInfo(70, "المعارج", "Al-Ma'arij", 44, 568, "Makkah"),
    SurahInfo(71, "نوح", "Nuh", 28, 570, "Makkah"),
    SurahInfo(72, "الجن", "Al-Jinn", 28, 572, "Makkah"),
    SurahInfo(73, "المزمل", "Al-Muzzammil", 20, 574, "Makkah"),
    SurahInfo(74, "المدثر", "Al-Muddaththir", 56, 575, "Makkah"),
    SurahInfo(75, "القيامة", "Al-Qiyamah", 40, 577, "Makkah"),
    SurahInfo(76, "الإنسان", "Al-Insan", 31, 578, "Madinah"),
    SurahInfo(77, "المرسلات", "Al-Mursalat", 50, 580, "Makkah"),
    SurahInfo(78, "النبأ", "An-Naba", 40, 582, "Makkah"),
    SurahInfo(79, "النازعات", "An-Nazi'at", 46, 583, "Makkah"),
    SurahInfo(80, "عبس", "Abasa", 42, 585, "Makkah"),
    SurahInfo(81, "التكوير", "At-Takwir", 29, 586, "Makkah"),
    SurahInfo(82, "الانفطار", "Al-Infitar", 19, 587, "Makkah"),
    SurahInfo(83, "المطففين", "Al-Mutaffifin", 36, 588, "Makkah"),
    SurahInfo(84, "الانشقاق", "Al-Inshiqaq", 25, 590, "Makkah"),
    SurahInfo(85, "البروج", "Al-Buruj", 22, 591, "Makkah"),
    SurahInfo(86, "الطارق", "At-Tariq", 17, 592, "Makkah"),
    SurahInfo(87, "الأعلى", "Al-A'la", 19, 593, "Makkah"),
    SurahInfo(88, "الغاشية", "Al-Ghashiyah", 26, 594, "Makkah"),
    SurahInfo(89, "الفجر", "Al-Fajr", 30, 595, "Makkah"),
    SurahInfo(90, "البلد", "Al-Balad", 20, 596, "Makkah"),
    SurahInfo(91, "الشمس", "Ash-Shams", 15, 597, "Makkah"),
    SurahInfo(92, "الليل", "Al-Layl", 21, 597, "Makkah"),
    SurahInfo(93, "الضحى", "Ad-Duha", 11, 598, "Makkah"),
    SurahInfo(94, "الشرح", "Ash-Sharh", 8, 599, "Makkah"),
    SurahInfo(95, "التين", "At-Tin", 8, 599, "Makkah"),
    SurahInfo(96, "العلق", "Al-Alaq", 19, 600, "Makkah"),
    SurahInfo(97, "القدر", "Al-Qadr", 5, 600, "Makkah"),
    SurahInfo(98, "البينة", "Al-Bayyinah", 8, 601, "Madinah"),
    SurahInfo(99, "الزلزلة", "Az-Zalzalah", 8, 601, "Madinah"),
    SurahInfo(100, "العاديات", "Al-Adiyat", 11, 602, "Makkah"),
    SurahInfo(101, "القارعة", "Al-Qari'ah", 11, 602, "Makkah"),
    SurahInfo(102, "التكاثر", "At-Takathur", 8, 603, "Makkah"),
    SurahInfo(103, "العصر", "Al-Asr", 3, 603, "Makkah"),
    SurahInfo(104, "الهمزة", "Al-Humazah", 9, 603, "Makkah"),
    SurahInfo(105, "الفيل", "Al-Fil", 5, 604, "Makkah"),
    SurahInfo(106, "قريش", "Quraysh", 4, 604, "Makkah"),
    SurahInfo(107, "الماعون", "Al-Ma'un", 7, 604, "Makkah"),
    SurahInfo(108, "الكوثر", "Al-Kawthar", 3, 604, "Makkah"),
    SurahInfo(109, "الكافرون", "Al-Kafirun", 6, 604, "Makkah"),
    SurahInfo(110, "النصر", "An-Nasr", 3, 604, "Madinah"),
    SurahInfo(111, "المسد", "Al-Masad", 5, 604, "Makkah"),
    SurahInfo(112, "الإخلاص", "Al-Ikhlas", 4, 604, "Makkah"),
    SurahInfo(113, "الفلق", "Al-Falaq", 5, 604, "Makkah"),
    SurahInfo(114, "الناس", "An-Nas", 6, 604, "Makkah"),
)

JUZ: Tuple[JuzInfo, ...] = (
    JuzInfo(1, 1, 21, 1, 1),
    JuzInfo(2, 22, 41, 2, 142),
    JuzInfo(3, 42, 61, 2, 253),
    JuzInfo(4, 62, 81, 3, 93),
    JuzInfo(5, 82, 101, 4, 24),
    JuzInfo(6, 102, 121, 4, 148),
    JuzInfo(7, 122, 141, 5, 82),
    JuzInfo(8, 142, 161, 6, 111),
    JuzInfo(9, 162, 181, 7, 88),
    JuzInfo(10, 182, 201, 8, 41),
    JuzInfo(11, 202, 221, 9, 93),
    JuzInfo(12, 222, 241, 11, 6),
    JuzInfo(13, 242, 261, 12, 53),
    JuzInfo(14, 262, 281, 15, 1),
    JuzInfo(15, 282, 301, 17, 1),
    JuzInfo(16, 302, 321, 18, 75),
    JuzInfo(17, 322, 341, 21, 1),
    JuzInfo(18, 342, 361, 23, 1),
    JuzInfo(19, 362, 381, 25, 21),
    JuzInfo(20, 382, 401, 27, 56),
    JuzInfo(21, 402, 421, 29, 46),
    JuzInfo(22, 422, 441, 33, 31),
    JuzInfo(23, 442, 461, 36, 28),
    JuzInfo(24, 462, 481, 39, 32),
    JuzInfo(25, 482, 501, 41, 47),
    JuzInfo(26, 502, 521, 46, 1),
    JuzInfo(27, 522, 541, 51, 31),
    JuzInfo(28, 542, 561, 58, 1),
    JuzInfo(29, 562, 581, 67, 1),
    JuzInfo(30, 582, 604, 78, 1),
)

_SURAHS_BY_ID: Dict[int, SurahInfo] = {surah.id: surah for surah in SURAHS}


def get_surah_by_id(surah_id: int) -> Optional[SurahInfo]:
    return _SURAHS_BY_ID.get(surah_id)


def get_surah_by_page(page: int) -> Optional[SurahInfo]:
    """Last surah starting on or before the page."""
    found = None
    for surah in SURAHS:
        if surah.start_page > page:
            break
        found = surah
    return found


def get_juz_by_page(page: int) -> Optional[JuzInfo]:
    for juz in JUZ:
        if juz.start_page <= page <= juz.end_page:
            return juz
    return None


def get_page_for_surah_ayah(surah: int, ayah: int) -> int:
    """Start page of the juz containing surah:ayah."""
    for juz in reversed(JUZ):
        if juz.start_surah < surah or (juz.start_surah == surah and juz.start_ayah <= ayah):
            return juz.start_page
    return 1


def surah_page_spans() -> List[Tuple[int, int, Tuple[int, ...]]]:
    """
    Page spans anchored at surah start pages.

    Returns (first_page, last_page, surah_ids) for every distinct start page;
    a span runs until the page before the next distinct start page.
    """
    starts: Dict[int, List[int]] = {}
    for surah in SURAHS:
        starts.setdefault(surah.start_page, []).append(surah.id)

    ordered = sorted(starts)
    spans = []
    for i, first_page in enumerate(ordered):
        last_page = ordered[i + 1] - 1 if i + 1 < len(ordered) else TOTAL_PAGES
        spans.append((first_page, last_page, tuple(starts[first_page])))
    return spans
