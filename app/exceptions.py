"""커스텀 예외 클래스 정의"""


class BaseAppError(Exception):
    """애플리케이션 기본 예외 클래스"""
    
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(BaseAppError):
    """잘못된 입력일 때 발생하는 예외 (400)

    빈 이름, 1 미만의 제한 시간, A-D 이외의 선택지 등
    """
    
    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class NotFoundError(BaseAppError):
    """참조한 레코드를 찾을 수 없을 때 발생하는 예외 (404)"""
    
    def __init__(self, message: str):
        super().__init__(message, status_code=404)


class QuizSessionNotFoundError(NotFoundError):
    """퀴즈 세션을 찾을 수 없을 때 발생하는 예외 (404)"""
    
    def __init__(self, quiz_session_id: str):
        self.quiz_session_id = quiz_session_id
        super().__init__(f"퀴즈 세션을 찾을 수 없습니다: {quiz_session_id}")


class StudentNotFoundError(NotFoundError):
    """학생을 찾을 수 없을 때 발생하는 예외 (404)"""
    
    def __init__(self, student_id: str):
        self.student_id = student_id
        super().__init__(f"학생을 찾을 수 없습니다: {student_id}")


class ConstraintError(BaseAppError):
    """저장소의 참조/유일성 제약 위반 (409)"""
    
    def __init__(self, message: str = "데이터 제약 조건을 위반했습니다"):
        super().__init__(message, status_code=409)


class UnauthorizedError(BaseAppError):
    """관리자 권한 없이 보호된 작업을 시도했을 때 발생하는 예외 (401)"""
    
    def __init__(self, message: str = "관리자 인증이 필요합니다"):
        super().__init__(message, status_code=401)
