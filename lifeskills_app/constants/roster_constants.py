"""Static class rosters and teacher accounts."""

# (username, display name, class level, room)
TEACHER_ACCOUNTS: tuple[tuple[str, str, str, str], ...] = (
    ("teacherm4a", "นางสาวสุภาพร ใจดี", "ม.4", "A"),
    ("teacherm5a", "นายธนากร ศรีสุข", "ม.5", "A"),
    ("teacherm6a", "นางวราภรณ์ พงษ์ไทย", "ม.6", "A"),
)

# (class level, room) -> student names in roster order; student ids start at 1.
CLASS_ROSTERS: dict[tuple[str, str], tuple[str, ...]] = {
    ("ม.4", "A"): (
        "นายกิตติพัฒน์ แสงทอง",
        "นายจิรายุ บุญมา",
        "นายณัฐวุฒิ คงเจริญ",
        "นายธีรภัทร สายสุวรรณ",
        "นายภูมิพัฒน์ วงศ์ใหญ่",
        "นางสาวกมลชนก ศรีวงศ์",
        "นางสาวชนิดา มีสุข",
        "นางสาวณัฐธิดา ทองดี",
        "นางสาวปริยากร แก้วมณี",
        "นางสาวพิมพ์ชนก รุ่งเรือง",
    ),
    ("ม.5", "A"): (
        "นายกฤษดา พรหมมา",
        "นายชยพล อินทร์แก้ว",
        "นายธนวัฒน์ เพชรรัตน์",
        "นายปกรณ์ ศรีทอง",
        "นายวรเมธ จันทร์หอม",
        "นางสาวกัญญาณัฐ บุญเรือง",
        "นางสาวจิดาภา สุขสวัสดิ์",
        "นางสาวธัญชนก ใจงาม",
        "นางสาวเบญญาภา ทรัพย์มาก",
        "นางสาวศศิกานต์ นาคสุข",
    ),
    ("ม.6", "A"): (
        "นายกันตภณ วิเศษศักดิ์",
        "นายณภัทร ปานทอง",
        "นายพีรพัฒน์ ชัยมงคล",
        "นายรัชชานนท์ ศรีสมบูรณ์",
        "นายอนุชา แก้วประเสริฐ",
        "นางสาวขวัญข้าว พูลสวัสดิ์",
        "นางสาวณิชาภัทร บัวทอง",
        "นางสาวปาณิสรา เกิดผล",
        "นางสาวภัทรวดี สมบัติทอง",
        "นางสาวอรปรียา ดวงแก้ว",
    ),
}
