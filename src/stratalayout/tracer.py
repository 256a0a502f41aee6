"""
Debug tracing for the layout pipeline.

When a ``LayoutTrace`` is passed to ``SugiyamaLayout.compute``, the engine
records a snapshot after every stage of the pipeline. The trace is owned by
the caller; the engine itself keeps no state between calls.

This is primarily useful for:
1. Understanding why a node ended up in a given layer or position
2. Watching the layer order evolve across crossing-reduction iterations
3. Writing targeted tests against intermediate states

Usage:
    >>> trace = LayoutTrace()
    >>> result = SugiyamaLayout().compute(graph, trace=trace)
    >>> print(trace.summary())
    >>> trace.dump_to_file("layout_trace.txt")

Stages recorded:
- layers_assigned: layers straight out of layer assignment
- sweep_<n>: layer order after crossing-reduction iteration n (1-based)
- crossings_reduced: final order, iterations run, crossing counts
- coordinates_assigned: positions and dimensions
"""

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class PipelineStage:
    """
    Snapshot of state at a pipeline stage.

    Attributes:
        name: Name of this pipeline stage
        data: Dictionary of relevant data at this stage
    """

    name: str
    data: Dict[str, Any]

    def __str__(self) -> str:
        lines = [f"=== Stage: {self.name} ==="]
        for key, value in self.data.items():
            # Truncate long values
            str_val = str(value)
            if len(str_val) > 100:
                str_val = str_val[:100] + "..."
            lines.append(f"  {key}: {str_val}")
        return "\n".join(lines)


@dataclass
class LayoutTrace:
    """
    Complete trace of a layout computation.

    Attributes:
        stages: List of pipeline stages with their data
        direction: The layout direction (TB or LR)
    """

    stages: List[PipelineStage] = field(default_factory=list)
    direction: str = "TB"

    def add_stage(self, name: str, data: Dict[str, Any]) -> None:
        """
        Add a pipeline stage snapshot.

        Values are deep-copied so later in-place changes to the layers do
        not alter earlier snapshots.

        Args:
            name: Name of the stage (e.g., "layers_assigned")
            data: Dictionary of relevant data at this stage
        """
        self.stages.append(PipelineStage(name, copy.deepcopy(data)))

    def get_stage(self, name: str) -> Optional[PipelineStage]:
        """Get a specific pipeline stage by name."""
        for stage in self.stages:
            if stage.name == name:
                return stage
        return None

    def stage_names(self) -> List[str]:
        return [stage.name for stage in self.stages]

    def sweeps(self) -> List[PipelineStage]:
        """All crossing-reduction iteration snapshots, in order."""
        return [stage for stage in self.stages if stage.name.startswith("sweep_")]

    def summary(self) -> str:
        """
        Generate a human-readable summary of the trace.

        Returns a string with the direction, the stage list and the
        crossing counts before and after reduction when available.
        """
        lines = [
            "=" * 60,
            "LAYOUT TRACE SUMMARY",
            "=" * 60,
            "",
            f"Direction: {self.direction}",
            "",
            f"Pipeline stages: {len(self.stages)}",
        ]

        for stage in self.stages:
            lines.append(f"  {stage.name}")

        reduced = self.get_stage("crossings_reduced")
        if reduced is not None:
            lines.extend(
                [
                    "",
                    f"Iterations run: {reduced.data.get('iterations')}",
                    f"Crossings before: {reduced.data.get('crossings_before')}",
                    f"Crossings after: {reduced.data.get('crossings_after')}",
                ]
            )

        return "\n".join(lines)

    def dump(self) -> str:
        """Generate a complete human-readable dump of the trace."""
        lines = [self.summary(), "", "=" * 60, "DETAILED TRACE", "=" * 60, ""]

        lines.append("PIPELINE STAGES:")
        lines.append("-" * 40)
        for stage in self.stages:
            lines.append(str(stage))
            lines.append("")

        return "\n".join(lines)

    def dump_to_file(self, filename: str) -> None:
        """Write the complete trace dump to a file."""
        with open(filename, "w", encoding="utf-8") as f:
            f.write(self.dump())
