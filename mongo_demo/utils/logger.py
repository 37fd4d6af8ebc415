"""
로깅 유틸리티

서버와 데모 러너에서 공통으로 사용할 로거 설정입니다.
"""
sample_logger = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "access": {
            "()": "uvicorn.logging.AccessFormatter",
            "fmt": '%(levelprefix)s %(asctime)s :: "%(request_line)s" %(status_code)s',
            "use_colors": True,
        },
        "default": {
            "format": "%(levelname)s:     %(asctime)s - %(name)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "access": {
            "formatter": "access",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
        },
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "uvicorn.access": {"handlers": ["access"], "level": "INFO", "propagate": False},
        "mongo_demo": {"handlers": ["default"], "level": "INFO", "propagate": False},
        "pymongo": {"handlers": ["default"], "level": "WARNING", "propagate": False},
    },
}

# 데모 러너는 uvicorn 없이 실행되므로 access 포맷터를 제외한 설정을 사용
cli_logger = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {"default": sample_logger["formatters"]["default"]},
    "handlers": {"default": sample_logger["handlers"]["default"]},
    "loggers": {
        "mongo_demo": {"handlers": ["default"], "level": "WARNING", "propagate": False},
        "pymongo": {"handlers": ["default"], "level": "WARNING", "propagate": False},
    },
}
