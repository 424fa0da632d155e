# 파라미터 설정

use_numba      = True    # compute_M_matrix default path
min_rows_numba = 64      # fewer points than this -> numpy path

numba_parallel = True    # prange over points
numba_fastmath = False   # keep nan/inf propagation identical to numpy
