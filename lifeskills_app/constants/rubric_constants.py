"""Rubric constants shared across UI and core layers.

The catalog is fixed: six indicators of five items each, numbered 1-30.
"""

SCHOOL_NAME: str = "โรงเรียนสาธิตอุดมศึกษา"
SCHOOL_LOCATION: str = "อ.บางละมุง จ.ชลบุรี"
FORM_TITLE: str = "แบบประเมินความสามารถในการใช้ทักษะชีวิต"
FORM_SUBTITLE: str = "ชั้นมัธยมศึกษาปีที่ 4 - 6"

QUESTION_COUNT: int = 30
MAX_SCORE_PER_QUESTION: int = 3
MAX_TOTAL_SCORE: int = QUESTION_COUNT * MAX_SCORE_PER_QUESTION
SCORE_CHOICES: tuple[int, ...] = (3, 2, 1, 0)

EXCELLENT_THRESHOLD: float = 75.0
GOOD_THRESHOLD: float = 50.0
FAIR_THRESHOLD: float = 25.0

SCORE_LEGEND: dict[int, str] = {
    3: "นักเรียนปฏิบัติ/แสดงพฤติกรรมดังกล่าวเป็นประจำ",
    2: "นักเรียนปฏิบัติ/แสดงพฤติกรรมดังกล่าวบ่อยครั้ง",
    1: "นักเรียนปฏิบัติ/แสดงพฤติกรรมดังกล่าวบางครั้ง",
    0: "นักเรียนไม่เคยปฏิบัติหรืออาจปฏิบัติแต่ไม่ค่อยชัดเจน",
}

# (indicator title, item prompts) in catalog order; item ids are assigned
# sequentially from 1.
INDICATOR_CATALOG: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "ตัวชี้วัดที่ 1 นำกระบวนการที่เรียนรู้ไปใช้ในชีวิตประจำวัน",
        (
            "นำความรู้ที่ได้จากการเรียนไปใช้แก้ปัญหาในชีวิตประจำวัน",
            "วางแผนการใช้เวลาในการเรียนและกิจกรรมต่าง ๆ ได้เหมาะสม",
            "ดูแลรักษาสุขภาพร่างกายและจิตใจของตนเอง",
            "ใช้จ่ายเงินอย่างประหยัดและรู้จักเก็บออม",
            "ช่วยเหลืองานบ้านและงานส่วนรวมตามโอกาส",
        ),
    ),
    (
        "ตัวชี้วัดที่ 2 เรียนรู้ด้วยตนเองและเรียนรู้อย่างต่อเนื่อง",
        (
            "แสวงหาความรู้เพิ่มเติมจากแหล่งเรียนรู้ที่หลากหลาย",
            "ตั้งเป้าหมายในการเรียนรู้และติดตามความก้าวหน้าของตนเอง",
            "ใช้เทคโนโลยีสารสนเทศในการเรียนรู้อย่างรู้เท่าทัน",
            "ซักถามหรือขอคำแนะนำเมื่อไม่เข้าใจ",
            "สรุปและบันทึกสิ่งที่ได้เรียนรู้อย่างสม่ำเสมอ",
        ),
    ),
    (
        "ตัวชี้วัดที่ 3 ทำงานและอยู่ร่วมกับผู้อื่นด้วยความสัมพันธ์อันดี",
        (
            "รับฟังความคิดเห็นของผู้อื่นอย่างตั้งใจ",
            "แสดงความคิดเห็นอย่างสุภาพและมีเหตุผล",
            "ทำงานร่วมกับผู้อื่นตามบทบาทหน้าที่ที่ได้รับมอบหมาย",
            "ให้ความช่วยเหลือและแบ่งปันแก่ผู้อื่น",
            "ยอมรับความแตกต่างระหว่างบุคคล",
        ),
    ),
    (
        "ตัวชี้วัดที่ 4 จัดการปัญหาและความขัดแย้งอย่างเหมาะสม",
        (
            "ควบคุมอารมณ์ของตนเองเมื่อเผชิญกับสถานการณ์ที่ไม่พึงพอใจ",
            "วิเคราะห์สาเหตุของปัญหาก่อนตัดสินใจแก้ไข",
            "เลือกวิธีแก้ปัญหาโดยไม่ใช้ความรุนแรง",
            "ไกล่เกลี่ยหรือประนีประนอมเมื่อเกิดความขัดแย้ง",
            "ยอมรับผลที่เกิดจากการกระทำของตนเอง",
        ),
    ),
    (
        "ตัวชี้วัดที่ 5 ปรับตัวให้ทันกับการเปลี่ยนแปลงของสังคมและสภาพแวดล้อม",
        (
            "ปรับตัวเข้ากับสภาพแวดล้อมและบุคคลใหม่ได้",
            "ติดตามข่าวสารและการเปลี่ยนแปลงในสังคม",
            "เลือกรับและใช้ข้อมูลข่าวสารอย่างมีวิจารณญาณ",
            "ร่วมอนุรักษ์ทรัพยากรธรรมชาติและสิ่งแวดล้อม",
            "ยอมรับและเรียนรู้จากความผิดพลาดเพื่อพัฒนาตนเอง",
        ),
    ),
    (
        "ตัวชี้วัดที่ 6 หลีกเลี่ยงพฤติกรรมไม่พึงประสงค์ที่ส่งผลกระทบต่อตนเองและผู้อื่น",
        (
            "ปฏิเสธการชักชวนไปสู่พฤติกรรมเสี่ยง",
            "หลีกเลี่ยงสิ่งเสพติดและอบายมุขทุกชนิด",
            "ปฏิบัติตามกฎระเบียบของโรงเรียนและสังคม",
            "ใช้สื่อออนไลน์อย่างปลอดภัยและไม่สร้างความเดือดร้อนแก่ผู้อื่น",
            "ป้องกันตนเองจากอันตรายและอุบัติเหตุ",
        ),
    ),
)
