"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "แบบประเมินความสามารถในการใช้ทักษะชีวิต"

LOGIN_USERNAME_LABEL: str = "ชื่อผู้ใช้งาน (User)"
LOGIN_PASSWORD_LABEL: str = "รหัสผ่าน (Password)"
LOGIN_USERNAME_PLACEHOLDER: str = "เช่น teacherm4a"
LOGIN_PASSWORD_PLACEHOLDER: str = "กรอกรหัสผ่าน"
LOGIN_BUTTON: str = "เข้าสู่ระบบ"
LOGIN_FAILED_MESSAGE: str = "ชื่อผู้ใช้งานหรือรหัสผ่านไม่ถูกต้อง"
LOGIN_LOADING_MESSAGE: str = "กำลังโหลดข้อมูลจาก Google Sheets…"

ROSTER_TEACHER_TEMPLATE: str = "ครูประจำชั้น: {name} | ชั้น {class_level} ห้อง {room}"
ROSTER_PROGRESS_TEMPLATE: str = "ประเมินแล้ว {done}/{total} คน"
ROSTER_HEADERS: tuple[str, ...] = ("เลขที่", "ชื่อ-นามสกุล", "สถานะ", "ระดับคุณภาพ")
ROSTER_STATUS_DONE: str = "ประเมินแล้ว"
ROSTER_STATUS_PENDING: str = "ยังไม่ประเมิน"
ROSTER_EVALUATE_BUTTON: str = "ประเมิน"
ROSTER_EXPORT_BUTTON: str = "ส่งออก Excel"
ROSTER_LOGOUT_BUTTON: str = "ออกจากระบบ"
ROSTER_NO_SELECTION_MESSAGE: str = "กรุณาเลือกนักเรียนก่อน"

FORM_BACK_BUTTON: str = "กลับหน้ารายชื่อ"
FORM_SAVE_BUTTON: str = "บันทึกข้อมูล"
FORM_CANCEL_BUTTON: str = "ยกเลิก"
FORM_STUDENT_TEMPLATE: str = "ชื่อ-สกุล: {name}    ระดับชั้น: {class_level}/{room}    เลขที่: {student_id}"
FORM_INSTRUCTIONS_TITLE: str = "คำชี้แจง"
FORM_INSTRUCTIONS: str = "ให้ครูเลือกระดับที่ตรงกับพฤติกรรมของนักเรียน ตามเกณฑ์พิจารณาดังนี้"
FORM_TOTAL_TEMPLATE: str = "คะแนนรวม: {total}/{max_total}"
FORM_PERCENT_TEMPLATE: str = "สรุปคะแนนร้อยละ: {percentage} %"
FORM_QUALITY_TEMPLATE: str = "นักเรียนอยู่ในระดับ: {quality}"
FORM_ANSWERED_TEMPLATE: str = "ประเมินแล้ว {answered}/{count} ข้อ"
FORM_STRENGTHS_LABEL: str = "จุดเด่นของนักเรียนคือ"
FORM_IMPROVEMENTS_LABEL: str = "จุดที่ควรพัฒนาของนักเรียนคือ"
FORM_STRENGTHS_PLACEHOLDER: str = "ระบุจุดเด่น..."
FORM_IMPROVEMENTS_PLACEHOLDER: str = "ระบุสิ่งที่ควรพัฒนา..."
FORM_SIGNATURE_TEMPLATE: str = "ลงชื่อ: {name} ครูผู้สอน"

INCOMPLETE_TITLE: str = "ข้อมูลไม่ครบถ้วน"
INCOMPLETE_TEMPLATE: str = "กรุณาประเมินให้ครบทุกข้อ (ทำไปแล้ว {answered}/{count} ข้อ)"
INVALID_SCORES_TITLE: str = "คะแนนไม่ถูกต้อง"
CONFIRM_SAVE_TITLE: str = "ยืนยันการบันทึกข้อมูล?"
CONFIRM_SAVE_TEMPLATE: str = "คุณต้องการบันทึกผลการประเมินของ {name} ใช่หรือไม่?"
SAVING_MESSAGE: str = "กำลังบันทึกข้อมูล… กรุณารอสักครู่"
SAVE_SUCCESS_TITLE: str = "บันทึกสำเร็จ!"
SAVE_SUCCESS_MESSAGE: str = "ข้อมูลถูกบันทึกเรียบร้อยแล้ว"
SAVE_REMOTE_FAILED_TITLE: str = "บันทึกไว้ในเครื่องเท่านั้น"
SAVE_REMOTE_FAILED_MESSAGE: str = (
    "เกิดข้อผิดพลาดในการเชื่อมต่อกับ Google Sheets แต่ระบบได้บันทึกข้อมูลลงในเครื่องไว้แล้ว"
)
SAVE_LOCAL_FAILED_TITLE: str = "บันทึกไม่สำเร็จ"
SAVE_LOCAL_FAILED_MESSAGE: str = (
    "ไม่สามารถบันทึกข้อมูลลงในเครื่องได้ ({detail})"
)

EXPORT_DIALOG_TITLE: str = "บันทึกไฟล์ Excel"
EXPORT_FILE_FILTER: str = "Excel files (*.xlsx);;All files (*.*)"
EXPORT_DONE_TITLE: str = "ส่งออกสำเร็จ"
EXPORT_DONE_TEMPLATE: str = "บันทึกรายงานไปที่ {path}"
