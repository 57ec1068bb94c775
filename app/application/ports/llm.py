from abc import ABC, abstractmethod


class LLMPort(ABC):
    @abstractmethod
    def generate_reply(self, text: str, business_name: str) -> str:
        """
        Produce a short customer-facing reply for an unmatched message.

        Returns an empty string when the provider produced nothing usable.

        Raises:
            LLMUpstreamError: provider failures, including the case where every
                model candidate was rejected as not found.
        """
        raise NotImplementedError
