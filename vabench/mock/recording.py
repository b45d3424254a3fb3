"""
Conversion of recorded spikes to Neo data structures.

:copyright: Copyright 2006-2023 by the PyNN team, see AUTHORS.
:license: CeCILL, see LICENSE for details.
"""

from datetime import datetime

import numpy as np
import neo
import quantities as pq


def spike_segment(source_ids, senders, times, t_stop, label="", t_start=0.0):
    """
    Return a :class:`neo.Segment` containing one spike train per id in
    `source_ids`, ordered by id, built from the parallel arrays `senders`
    and `times` (ms).
    """
    segment = neo.Segment(name=label, rec_datetime=datetime.now())
    for source_id in sorted(int(i) for i in source_ids):
        spike_times = np.sort(times[senders == source_id])
        segment.spiketrains.append(
            neo.SpikeTrain(spike_times * pq.ms,
                           t_start=t_start * pq.ms,
                           t_stop=t_stop * pq.ms,
                           source_id=source_id))
    for train in segment.spiketrains:
        train.segment = segment
    return segment
