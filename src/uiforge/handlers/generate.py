"""Generate Handler - runs the request pipeline and records versions."""

import threading
import time

from ..core import bound_context, get_logger, validate_tree
from ..core.id import new_request_id
from ..core.validate import MAX_INPUT_LENGTH, sanitize_input
from ..agents.explainer import explain
from ..agents.generator import Generator
from ..agents.planner import Planner
from ..monitoring import metrics_collector, trace_operation
from .versions import Version, VersionStore


logger = get_logger(__name__)


class GenerateHandler:
    """Handles generation requests against a shared version history."""

    def __init__(
        self,
        planner: Planner,
        generator: Generator,
        store: VersionStore,
        max_input_length: int = MAX_INPUT_LENGTH,
    ) -> None:
        self.planner = planner
        self.generator = generator
        self.store = store
        self.max_input_length = max_input_length
        # Reading the latest tree and appending must not interleave
        self._lock = threading.Lock()

    def generate(self, user_text: str) -> Version:
        """
        Run classify, build, validate and explain, then record a version.

        Args:
            user_text: Raw request text

        Returns:
            The newly recorded version

        Raises:
            ValidationError: If the produced tree is invalid
            GenerationError: If the plan cannot be built
        """
        start_time = time.time()
        plan_type = "unknown"
        text = sanitize_input(user_text, self.max_input_length)

        with bound_context(request_id=new_request_id()), self._lock:
            latest = self.store.latest()
            previous_tree = latest.tree if latest else None
            logger.info("generate", text=text[:50], has_tree=previous_tree is not None)

            try:
                with trace_operation("ui_generation", version=len(self.store)) as span:
                    plan = self.planner.classify(text, previous_tree)
                    plan_type = span["plan_type"] = plan.type
                    tree = self.generator.build(plan, previous_tree)
                    validate_tree(tree)
                    explanation = explain(plan, tree, text)
            except Exception as e:
                metrics_collector.record_generate("error", plan_type, time.time() - start_time)
                metrics_collector.record_error(type(e).__name__)
                logger.error("generation", error=str(e), plan_type=plan_type)
                raise

            version = self.store.append(tree, explanation, text)

        metrics_collector.record_generate("success", plan_type, time.time() - start_time)
        logger.info("complete", version=version.id, plan_type=plan_type)
        return version
