import threading
from asyncio import sleep

# Предел для одного ожидания, мс; time_to_wait при этом растёт без ограничений
MAX_SLEEP_TIME = int(threading.TIMEOUT_MAX) * 1000


class RetryState:
    """
    Состояние повторных попыток подключения.
    Использует наивный экспоненциальный рост времени повтора (factor)
    без верхней границы.

    Формула:
        t = start_sleep_time * (factor ^ n), где n - номер ожидания с нуля
    :param max_tries: максимальное количество повторных попыток
    :param start_sleep_time: начальное время ожидания, мс
    :param factor: во сколько раз нужно увеличивать время ожидания
    после каждого ожидания
    """

    def __init__(self, max_tries: int, start_sleep_time: int, factor: int = 2):
        self.max_tries = max_tries
        self.factor = factor
        self.attempts = 0
        self.time_to_wait = start_sleep_time

    @property
    def exhausted(self) -> bool:
        return self.attempts >= self.max_tries

    async def wait(self, delay: int) -> None:
        """Подождать delay мс, затем увеличить время следующего ожидания."""
        await sleep(min(delay, MAX_SLEEP_TIME) / 1000)
        self.time_to_wait *= self.factor

    def next_attempt(self) -> int:
        """Засчитать повторную попытку и вернуть задержку перед ней, мс."""
        self.attempts += 1
        return self.time_to_wait
